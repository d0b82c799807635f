"""
Visit acceptance.

An administrator scans a user's QR code for a chosen activity. One accepted
scan creates exactly one Visit row and one 'earn' ledger entry, committed
together or not at all.
"""
import logging
from datetime import datetime
from typing import Optional, List

from flask import current_app

from ..extensions import db
from ..middleware.auth import Principal
from ..models import Activity, QRCode, Visit
from ..utils.cache import invalidate_stats
from ..utils.exceptions import (
    UnauthorizedError,
    InvalidActivityError,
    InvalidOrExpiredCodeError,
)
from .points_service import PointsService, points_service

logger = logging.getLogger(__name__)


class VisitService:
    """
    Usage:
        visit = VisitService().accept_visit(g.principal, code, 'gym')
    """

    def __init__(self, ledger: Optional[PointsService] = None):
        self.ledger = ledger or points_service

    def accept_visit(self, principal: Principal, code: str, activity_name: str) -> Visit:
        """
        Accept a scanned QR code as a visit and award the activity's points.

        Validation order: admin check, active activity, active unexpired code.
        The code is left active; it can be accepted again until it expires
        (unless QR_SINGLE_USE is enabled).

        Raises:
            UnauthorizedError: principal is not an administrator
            InvalidActivityError: no active activity named activity_name
            InvalidOrExpiredCodeError: no active, unexpired code matches
            Any ledger error, unchanged
        """
        try:
            if not principal or not principal.is_admin:
                raise UnauthorizedError()

            activity = Activity.query.filter_by(
                name=activity_name,
                is_active=True
            ).first()
            if not activity:
                raise InvalidActivityError(activity_name)

            qr_code = QRCode.query.filter(
                QRCode.code == code,
                QRCode.is_active.is_(True),
                QRCode.expires_at > datetime.utcnow()
            ).first()
            if not qr_code:
                raise InvalidOrExpiredCodeError()

            user_id = qr_code.user_id

            visit = Visit(
                user_id=user_id,
                activity_id=activity.id,
                accepted_by_id=principal.user_id
            )
            db.session.add(visit)
            db.session.flush()

            self.ledger.process_points_transaction(
                user_id,
                activity.points,
                'earn',
                'Points earned from ' + activity.name,
                {
                    'code': code,
                    'visit_id': visit.id,
                    'activity_name': activity.name,
                    'activity_id': activity.id,
                }
            )

            if current_app.config.get('QR_SINGLE_USE'):
                qr_code.is_active = False

            db.session.commit()

        except Exception as e:
            db.session.rollback()
            logger.error('Error in accept_visit: %s', e)
            raise

        invalidate_stats()
        logger.info(
            'Visit %s accepted for user %s (%s, +%s pts) by admin %s',
            visit.id, user_id, activity.name, activity.points, principal.user_id
        )
        return visit

    def list_visits(self, user_id: int, limit: int = 50) -> List[Visit]:
        """Most recent visits for a user."""
        return Visit.query.filter_by(user_id=user_id).order_by(
            Visit.created_at.desc(), Visit.id.desc()
        ).limit(limit).all()


visit_service = VisitService()
