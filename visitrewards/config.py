"""
Configuration management for the Visit Rewards backend.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


class BaseConfig:
    """Base configuration."""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # QR codes
    QR_CODE_TTL_MINUTES = int(os.getenv('QR_CODE_TTL_MINUTES', '5'))
    # Codes stay redeemable until expiry unless single-use is switched on
    QR_SINGLE_USE = _env_bool('QR_SINGLE_USE')

    # Venue occupancy used by the admin dashboard
    VENUE_CAPACITY = int(os.getenv('VENUE_CAPACITY', '100'))
    VISIT_DURATION_HOURS = int(os.getenv('VISIT_DURATION_HOURS', '3'))

    # Feedback
    REVIEW_WINDOW_HOURS = int(os.getenv('REVIEW_WINDOW_HOURS', '24'))

    ADMIN_STATS_CACHE_TIMEOUT = int(os.getenv('ADMIN_STATS_CACHE_TIMEOUT', '60'))

    # Expo dev server and web build origins
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            'CORS_ORIGINS',
            'http://localhost:8081,http://localhost:19006,http://127.0.0.1:8081'
        ).split(',')
        if origin.strip()
    ]


class DevelopmentConfig(BaseConfig):
    """Development configuration."""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv(
        'DATABASE_URL',
        'sqlite:///visitrewards_dev.db'
    )


class ProductionConfig(BaseConfig):
    """Production configuration."""
    DEBUG = False

    # Heroku-style URLs use the postgres:// scheme
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', '').replace('postgres://', 'postgresql://', 1)
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True, 'pool_recycle': 300}

    SECRET_KEY = os.getenv('SECRET_KEY', '')
    MIN_SECRET_KEY_LENGTH = 32

    @classmethod
    def validate_secret_key(cls) -> str:
        """Refuse to start with a missing, short or placeholder SECRET_KEY."""
        key = cls.SECRET_KEY
        if not key:
            raise RuntimeError('SECRET_KEY must be set in production')
        if len(key) < cls.MIN_SECRET_KEY_LENGTH:
            raise RuntimeError(
                f'SECRET_KEY must be at least {cls.MIN_SECRET_KEY_LENGTH} characters'
            )
        if key == BaseConfig.SECRET_KEY or 'change-in-production' in key:
            raise RuntimeError('SECRET_KEY is still the development placeholder')
        return key


class TestingConfig(BaseConfig):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    QR_SINGLE_USE = False
    VENUE_CAPACITY = 10
    CACHE_TYPE = 'NullCache'


config_map = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig
}


def get_config(config_name: str = 'development'):
    """Get configuration class by name."""
    return config_map.get(config_name, DevelopmentConfig)


def validate_config(config_name: str = 'development') -> None:
    """
    Validate configuration before app startup.

    Raises:
        RuntimeError: If validation fails in production
    """
    if config_name == 'production':
        ProductionConfig.validate_secret_key()
