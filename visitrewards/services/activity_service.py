"""
Activity catalog management (admin).
"""
from typing import List

from flask import current_app

from ..extensions import db
from ..models import Activity
from ..utils.exceptions import ValidationError, DuplicateError, NotFoundError
from ..utils.cache import invalidate_stats


class ActivityService:

    def list_activities(self, include_inactive: bool = False) -> List[Activity]:
        query = Activity.query
        if not include_inactive:
            query = query.filter_by(is_active=True)
        return query.order_by(Activity.name).all()

    def create_activity(self, name: str, points: int, description: str = None) -> Activity:
        name = (name or '').strip()
        if not name:
            raise ValidationError('Activity name is required', 'name')
        self._validate_points(points)

        if Activity.query.filter_by(name=name).first():
            raise DuplicateError('Activity', f"name '{name}'")

        activity = Activity(name=name, points=points, description=description, is_active=True)
        db.session.add(activity)
        db.session.commit()

        current_app.logger.info(f"Activity created: {name} ({points} pts)")
        return activity

    def set_active(self, activity_id: int, is_active: bool) -> Activity:
        activity = self._get(activity_id)
        if not isinstance(is_active, bool):
            raise ValidationError('is_active must be true or false', 'is_active')
        activity.is_active = is_active
        db.session.commit()
        return activity

    def update_points(self, activity_id: int, points: int) -> Activity:
        self._validate_points(points)
        activity = self._get(activity_id)
        activity.points = points
        db.session.commit()
        invalidate_stats()
        return activity

    def _get(self, activity_id: int) -> Activity:
        activity = db.session.get(Activity, activity_id)
        if not activity:
            raise NotFoundError('Activity', activity_id)
        return activity

    @staticmethod
    def _validate_points(points) -> None:
        if isinstance(points, bool) or not isinstance(points, int) or points <= 0:
            raise ValidationError('Points must be a positive integer', 'points')


activity_service = ActivityService()
