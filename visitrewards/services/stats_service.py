"""
Admin dashboard statistics.
"""
from datetime import datetime, timedelta
from typing import Dict, Any

from flask import current_app
from sqlalchemy import func

from ..extensions import db
from ..models import Visit, RewardRedemption, PointsTransaction
from ..utils.cache import cache, ADMIN_STATS_KEY


class StatsService:

    def get_admin_stats(self) -> Dict[str, Any]:
        """Cached dashboard aggregates (see compute_admin_stats)."""
        stats = cache.get(ADMIN_STATS_KEY)
        if stats is None:
            stats = self.compute_admin_stats()
            cache.set(
                ADMIN_STATS_KEY,
                stats,
                timeout=current_app.config.get('ADMIN_STATS_CACHE_TIMEOUT', 60)
            )
        return stats

    def compute_admin_stats(self) -> Dict[str, Any]:
        """
        Today's figures (since UTC midnight):

        - visits_count: accepted visits
        - rewards_used: reward redemptions
        - points_awarded: sum of 'earn' ledger entries
        - capacity_percentage: visits still "in the venue" (accepted within
          VISIT_DURATION_HOURS) against VENUE_CAPACITY, capped at 100
        """
        day_start = datetime.utcnow().replace(hour=0, minute=0, second=0, microsecond=0)

        visits_count = db.session.query(func.count(Visit.id)).filter(
            Visit.created_at >= day_start
        ).scalar() or 0
        rewards_used = db.session.query(func.count(RewardRedemption.id)).filter(
            RewardRedemption.created_at >= day_start
        ).scalar() or 0

        points_awarded = db.session.query(
            func.coalesce(func.sum(PointsTransaction.points), 0)
        ).filter(
            PointsTransaction.transaction_type == 'earn',
            PointsTransaction.points > 0,
            PointsTransaction.created_at >= day_start
        ).scalar()

        return {
            'since': day_start.isoformat(),
            'visits_count': int(visits_count),
            'rewards_used': int(rewards_used),
            'points_awarded': int(points_awarded or 0),
            'capacity_percentage': self.capacity_percentage(),
            'as_of': datetime.utcnow().isoformat()
        }

    def capacity_percentage(self) -> int:
        capacity = current_app.config.get('VENUE_CAPACITY', 100)
        if not capacity or capacity <= 0:
            return 0

        hours = current_app.config.get('VISIT_DURATION_HOURS', 3)
        since = datetime.utcnow() - timedelta(hours=hours)
        current_visits = db.session.query(func.count(Visit.id)).filter(
            Visit.created_at >= since
        ).scalar() or 0

        return min(100, round(current_visits * 100 / capacity))


stats_service = StatsService()
