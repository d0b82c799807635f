"""
CLI Commands for Visit Rewards.

Usage:
    flask loyalty create-user --email admin@example.com --admin
    flask loyalty seed-activities
    flask loyalty purge-expired-codes --days 30
"""
from .loyalty import init_app as init_loyalty_commands


def init_app(app):
    """Register all CLI commands with the Flask app."""
    init_loyalty_commands(app)
