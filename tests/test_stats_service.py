"""
Tests for admin dashboard statistics.
"""
from datetime import datetime, timedelta

from visitrewards.extensions import db
from visitrewards.models import Visit, Reward, RewardRedemption, PointsTransaction
from visitrewards.services.stats_service import StatsService


def _visit(user, hours_ago=0):
    db.session.add(Visit(user_id=user.id, created_at=datetime.utcnow() - timedelta(hours=hours_ago)))


class TestAdminStats:

    def test_empty_database(self, app):
        stats = StatsService().get_admin_stats()

        assert stats['visits_count'] == 0
        assert stats['rewards_used'] == 0
        assert stats['points_awarded'] == 0
        assert stats['capacity_percentage'] == 0

    def test_counts(self, sample_user):
        for _ in range(3):
            _visit(sample_user)
        reward = Reward(name='Coffee', points_cost=5)
        db.session.add(reward)
        db.session.flush()
        db.session.add(RewardRedemption(user_id=sample_user.id, reward_id=reward.id, points_spent=5))
        db.session.add_all([
            PointsTransaction(user_id=sample_user.id, points=10, transaction_type='earn'),
            PointsTransaction(user_id=sample_user.id, points=15, transaction_type='earn'),
            PointsTransaction(user_id=sample_user.id, points=-5, transaction_type='redeem'),
            PointsTransaction(user_id=sample_user.id, points=7, transaction_type='adjustment'),
        ])
        db.session.commit()

        stats = StatsService().compute_admin_stats()

        assert stats['visits_count'] == 3
        assert stats['rewards_used'] == 1
        assert stats['points_awarded'] == 25

    def test_capacity_counts_recent_visits_only(self, app, sample_user):
        # VENUE_CAPACITY is 10 under TestingConfig
        for _ in range(3):
            _visit(sample_user, hours_ago=1)
        _visit(sample_user, hours_ago=5)
        db.session.commit()

        assert StatsService().capacity_percentage() == 30

    def test_capacity_capped_at_100(self, app, sample_user):
        for _ in range(15):
            _visit(sample_user)
        db.session.commit()

        assert StatsService().capacity_percentage() == 100

    def test_zero_capacity(self, app, sample_user):
        app.config['VENUE_CAPACITY'] = 0
        _visit(sample_user)
        db.session.commit()

        assert StatsService().capacity_percentage() == 0

    def test_counts_only_today(self, app, sample_user):
        _visit(sample_user, hours_ago=48)
        db.session.add(PointsTransaction(
            user_id=sample_user.id,
            points=40,
            transaction_type='earn',
            created_at=datetime.utcnow() - timedelta(days=2)
        ))
        _visit(sample_user)
        db.session.add(PointsTransaction(user_id=sample_user.id, points=10, transaction_type='earn'))
        db.session.commit()

        stats = StatsService().compute_admin_stats()

        assert stats['visits_count'] == 1
        assert stats['points_awarded'] == 10
