"""
Visit Rewards loyalty backend
Flask application factory
"""
import os
import logging
from flask import Flask
from flask_cors import CORS

from .extensions import db, migrate
from .config import get_config, validate_config
from .utils.logging_config import setup_logging
from .utils.cache import init_cache
from .utils.errors import register_error_handlers

logger = logging.getLogger(__name__)


def create_app(config_name: str = None) -> Flask:
    """
    Application factory for creating Flask app instances.

    Args:
        config_name: Configuration environment (development, production, testing)

    Returns:
        Configured Flask application
    """
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    # Setup logging before anything else
    setup_logging()

    validate_config(config_name)

    app = Flask(__name__)
    app.config.from_object(get_config(config_name))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    init_cache(app)

    CORS(
        app,
        origins=app.config['CORS_ORIGINS'],
        supports_credentials=True,
        allow_headers=['Content-Type', 'Authorization', 'X-Request-ID']
    )

    from .middleware import init_request_id_tracking
    init_request_id_tracking(app)

    register_blueprints(app)

    from .commands import init_app as init_commands
    init_commands(app)

    register_error_handlers(app)

    @app.route('/health')
    def health_check():
        return {'status': 'healthy', 'service': 'visitrewards'}

    logger.info('App created (config=%s, single_use_codes=%s)', config_name, app.config['QR_SINGLE_USE'])
    return app


def register_blueprints(app: Flask) -> None:
    """Register all API blueprints."""
    from .api.auth import auth_bp
    from .api.admin import admin_bp
    from .api.visits import visits_bp
    from .api.qr_codes import qr_codes_bp
    from .api.points import points_bp
    from .api.activities import activities_bp
    from .api.rewards import rewards_bp
    from .api.reviews import reviews_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(visits_bp, url_prefix='/api/visits')
    app.register_blueprint(qr_codes_bp, url_prefix='/api/qr-codes')
    app.register_blueprint(points_bp, url_prefix='/api/points')
    app.register_blueprint(activities_bp, url_prefix='/api/activities')
    app.register_blueprint(rewards_bp, url_prefix='/api/rewards')
    app.register_blueprint(reviews_bp, url_prefix='/api/reviews')
