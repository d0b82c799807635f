"""
Cache utilities for the Visit Rewards backend.

Provides Redis-backed caching with graceful fallback to simple in-memory caching.
Uses Flask-Caching for integration with Flask app.

Usage:
    from visitrewards.utils.cache import cache

    @cache.memoize(timeout=60)
    def get_expensive_data(param):
        ...

Environment Variables:
    REDIS_URL: Redis connection URL (e.g., redis://localhost:6379/0)
              Falls back to simple cache if not set or unavailable.
"""
import os
import logging
from flask_caching import Cache
import redis

logger = logging.getLogger(__name__)

# Global cache instance - initialized in init_cache()
cache = Cache()

ADMIN_STATS_KEY = 'admin_stats'


def init_cache(app):
    """
    Initialize Flask-Caching with Redis or fallback to simple cache.

    An explicit CACHE_TYPE in the app config (tests use NullCache) wins.

    Returns:
        bool: True if Redis connected, False otherwise
    """
    if app.config.get('CACHE_TYPE'):
        cache.init_app(app)
        logger.info('Using configured cache backend: %s', app.config['CACHE_TYPE'])
        return False

    redis_url = os.getenv('REDIS_URL')

    if redis_url:
        try:
            r = redis.from_url(redis_url, socket_connect_timeout=2)
            r.ping()

            app.config['CACHE_TYPE'] = 'RedisCache'
            app.config['CACHE_REDIS_URL'] = redis_url
            app.config['CACHE_DEFAULT_TIMEOUT'] = 300
            app.config['CACHE_KEY_PREFIX'] = 'visitrewards:'

            cache.init_app(app)
            logger.info('Redis cache connected: %s', redis_url.split('@')[-1])
            return True

        except redis.RedisError as e:
            logger.warning('Redis unavailable (%s), using simple cache', str(e))

    app.config['CACHE_TYPE'] = 'SimpleCache'
    app.config['CACHE_DEFAULT_TIMEOUT'] = 300

    cache.init_app(app)
    logger.info('Using simple in-memory cache (no Redis)')
    return False


def invalidate_stats():
    """Drop cached dashboard aggregates after a write that changes them.

    Runs after the write has committed, so a cache outage only leaves the
    dashboard stale until the entry times out.
    """
    try:
        cache.delete(ADMIN_STATS_KEY)
    except Exception as e:
        logger.warning('Cache invalidation failed: %s', e)
