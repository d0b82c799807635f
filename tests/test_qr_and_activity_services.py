"""
Tests for QRCodeService and ActivityService.
"""
import pytest
from datetime import datetime, timedelta

from visitrewards.extensions import db
from visitrewards.models import QRCode, Activity
from visitrewards.services.qr_service import QRCodeService
from visitrewards.services.activity_service import ActivityService
from visitrewards.utils.exceptions import (
    UserNotFoundError,
    NotFoundError,
    ValidationError,
    DuplicateError,
)


@pytest.fixture
def qr_service():
    return QRCodeService()


@pytest.fixture
def activities():
    return ActivityService()


class TestQRCodeService:

    def test_issue_code(self, app, qr_service, sample_user):
        before = datetime.utcnow()
        qr_code = qr_service.issue_code(sample_user.id)

        assert qr_code.user_id == sample_user.id
        assert qr_code.is_active is True
        assert len(qr_code.code) >= 32
        ttl = app.config['QR_CODE_TTL_MINUTES']
        assert before + timedelta(minutes=ttl) <= qr_code.expires_at
        assert qr_code.expires_at <= datetime.utcnow() + timedelta(minutes=ttl)

    def test_issued_codes_are_unique(self, qr_service, sample_user):
        codes = {qr_service.issue_code(sample_user.id).code for _ in range(5)}
        assert len(codes) == 5

    def test_issue_for_unknown_user(self, qr_service, app):
        with pytest.raises(UserNotFoundError):
            qr_service.issue_code(12345)

    def test_earlier_codes_stay_valid(self, qr_service, sample_user):
        first = qr_service.issue_code(sample_user.id)
        qr_service.issue_code(sample_user.id)

        assert db.session.get(QRCode, first.id).is_active is True

    def test_get_active_code_returns_newest(self, qr_service, sample_user, expired_qr_code):
        qr_service.issue_code(sample_user.id)
        newest = qr_service.issue_code(sample_user.id)

        assert qr_service.get_active_code(sample_user.id).id == newest.id

    def test_get_active_code_ignores_expired(self, qr_service, sample_user, expired_qr_code):
        assert qr_service.get_active_code(sample_user.id) is None

    def test_revoke_code(self, qr_service, sample_user, sample_qr_code):
        revoked = qr_service.revoke_code(sample_user.id, 'valid-code-123')

        assert revoked.is_active is False
        assert qr_service.get_active_code(sample_user.id) is None

    def test_revoke_someone_elses_code(self, qr_service, admin_user, sample_qr_code):
        with pytest.raises(NotFoundError):
            qr_service.revoke_code(admin_user.id, 'valid-code-123')

    def test_purge_expired(self, qr_service, sample_user, sample_qr_code):
        db.session.add(QRCode(
            code='ancient',
            user_id=sample_user.id,
            expires_at=datetime.utcnow() - timedelta(days=45)
        ))
        db.session.commit()

        assert qr_service.purge_expired(older_than_days=30) == 1
        assert QRCode.query.filter_by(code='ancient').first() is None
        assert QRCode.query.filter_by(code='valid-code-123').first() is not None


class TestActivityService:

    def test_create_activity(self, activities, app):
        activity = activities.create_activity('  sauna ', 5, 'Sauna visit')

        assert activity.id is not None
        assert activity.name == 'sauna'
        assert activity.points == 5
        assert activity.is_active is True

    def test_duplicate_name(self, activities, sample_activity):
        with pytest.raises(DuplicateError):
            activities.create_activity('gym', 15)

    @pytest.mark.parametrize('points', [0, -1, 2.5, None, True])
    def test_invalid_points(self, activities, app, points):
        with pytest.raises(ValidationError):
            activities.create_activity('boxing', points)

    def test_blank_name(self, activities, app):
        with pytest.raises(ValidationError):
            activities.create_activity('   ', 10)

    def test_list_hides_inactive_by_default(self, activities, sample_activity, inactive_activity):
        assert [a.name for a in activities.list_activities()] == ['gym']
        assert [a.name for a in activities.list_activities(include_inactive=True)] == ['gym', 'yoga']

    def test_deactivate(self, activities, sample_activity):
        activities.set_active(sample_activity.id, False)
        assert db.session.get(Activity, sample_activity.id).is_active is False

    def test_update_points(self, activities, sample_activity):
        assert activities.update_points(sample_activity.id, 12).points == 12

    def test_update_points_to_zero_rejected(self, activities, sample_activity):
        with pytest.raises(ValidationError):
            activities.update_points(sample_activity.id, 0)

        assert db.session.get(Activity, sample_activity.id).points == 10

    @pytest.mark.parametrize('value', ['false', 0, None])
    def test_set_active_requires_bool(self, activities, sample_activity, value):
        with pytest.raises(ValidationError):
            activities.set_active(sample_activity.id, value)

        assert db.session.get(Activity, sample_activity.id).is_active is True

    def test_missing_activity(self, activities, app):
        with pytest.raises(NotFoundError):
            activities.set_active(999, True)
