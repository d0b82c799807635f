"""
Loyalty administration commands.

# Daily cleanup of long-expired QR codes
0 3 * * * cd /app && flask loyalty purge-expired-codes --days=30
"""

import click
from flask.cli import with_appcontext

from ..extensions import db
from ..models import User, Activity
from ..services.qr_service import qr_code_service

DEFAULT_ACTIVITIES = [
    {'name': 'gym', 'points': 10, 'description': 'Gym session'},
    {'name': 'fitness', 'points': 15, 'description': 'Group fitness class'},
    {'name': 'sauna', 'points': 5, 'description': 'Sauna visit'},
]


@click.group('loyalty')
def loyalty_cli():
    """Loyalty program administration commands."""
    pass


@loyalty_cli.command('create-user')
@click.option('--email', required=True, help='User email address')
@click.option('--name', 'display_name', default=None, help='Display name')
@click.option('--admin', is_flag=True, help='Grant administrator privilege')
@with_appcontext
def create_user(email, display_name, admin):
    """Create a user and print its API token."""
    if User.query.filter_by(email=email).first():
        click.echo(f"User {email} already exists")
        return

    user = User(email=email, display_name=display_name, is_admin=admin)
    db.session.add(user)
    db.session.commit()

    click.echo(f"Created {'admin ' if admin else ''}user {user.id}: {email}")
    click.echo(f"API token: {user.api_token}")


@loyalty_cli.command('seed-activities')
@with_appcontext
def seed_activities():
    """Create the default activities if they do not exist."""
    created = 0
    for defaults in DEFAULT_ACTIVITIES:
        if Activity.query.filter_by(name=defaults['name']).first():
            continue
        db.session.add(Activity(is_active=True, **defaults))
        created += 1
    db.session.commit()

    click.echo(f"Seeded {created} activities ({len(DEFAULT_ACTIVITIES) - created} already present)")


@loyalty_cli.command('purge-expired-codes')
@click.option('--days', default=30, type=int, help='Delete codes expired more than N days ago')
@with_appcontext
def purge_expired_codes(days):
    """Delete QR codes that expired long ago."""
    deleted = qr_code_service.purge_expired(older_than_days=days)
    click.echo(f"Deleted {deleted} expired QR codes")


def init_app(app):
    app.cli.add_command(loyalty_cli)
