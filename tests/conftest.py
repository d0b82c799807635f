"""
Shared pytest fixtures.

Each test gets a fresh app on an in-memory SQLite database with an app
context pushed for the whole test, so models can be queried directly and
test-client requests share the same session.
"""
from datetime import datetime, timedelta

import pytest

from visitrewards import create_app
from visitrewards.extensions import db as _db
from visitrewards.middleware.auth import Principal
from visitrewards.models import User, Activity, QRCode


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    return _db.session


@pytest.fixture
def sample_user(app):
    user = User(email='member@example.com', display_name='Test Member')
    _db.session.add(user)
    _db.session.commit()
    return user


@pytest.fixture
def admin_user(app):
    user = User(email='admin@example.com', display_name='Front Desk', is_admin=True)
    _db.session.add(user)
    _db.session.commit()
    return user


@pytest.fixture
def member_principal(sample_user):
    return Principal.from_user(sample_user)


@pytest.fixture
def admin_principal(admin_user):
    return Principal.from_user(admin_user)


@pytest.fixture
def auth_headers(sample_user):
    return {
        'Authorization': f'Bearer {sample_user.api_token}',
        'Content-Type': 'application/json'
    }


@pytest.fixture
def admin_headers(admin_user):
    return {
        'Authorization': f'Bearer {admin_user.api_token}',
        'Content-Type': 'application/json'
    }


@pytest.fixture
def sample_activity(app):
    activity = Activity(name='gym', points=10, is_active=True, description='Gym session')
    _db.session.add(activity)
    _db.session.commit()
    return activity


@pytest.fixture
def inactive_activity(app):
    activity = Activity(name='yoga', points=20, is_active=False)
    _db.session.add(activity)
    _db.session.commit()
    return activity


@pytest.fixture
def sample_qr_code(sample_user):
    qr_code = QRCode(
        code='valid-code-123',
        user_id=sample_user.id,
        is_active=True,
        expires_at=datetime.utcnow() + timedelta(minutes=5)
    )
    _db.session.add(qr_code)
    _db.session.commit()
    return qr_code


@pytest.fixture
def expired_qr_code(sample_user):
    qr_code = QRCode(
        code='expired-code-456',
        user_id=sample_user.id,
        is_active=True,
        expires_at=datetime.utcnow() - timedelta(seconds=1)
    )
    _db.session.add(qr_code)
    _db.session.commit()
    return qr_code


@pytest.fixture
def inactive_qr_code(sample_user):
    qr_code = QRCode(
        code='revoked-code-789',
        user_id=sample_user.id,
        is_active=False,
        expires_at=datetime.utcnow() + timedelta(minutes=5)
    )
    _db.session.add(qr_code)
    _db.session.commit()
    return qr_code
