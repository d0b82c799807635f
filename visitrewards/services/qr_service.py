"""
QR code issuing and maintenance.

Codes are opaque URL-safe tokens with a short lifetime (QR_CODE_TTL_MINUTES).
A user may hold several live codes; each one stays redeemable until it
expires or is revoked.
"""
import secrets
from datetime import datetime, timedelta
from typing import Optional

from flask import current_app

from ..extensions import db
from ..models import User, QRCode
from ..utils.exceptions import UserNotFoundError, NotFoundError

CODE_BYTES = 24


class QRCodeService:

    def issue_code(self, user_id: int) -> QRCode:
        """Create and commit a fresh code for the user."""
        if not db.session.get(User, user_id):
            raise UserNotFoundError(user_id)

        ttl = current_app.config.get('QR_CODE_TTL_MINUTES', 5)
        now = datetime.utcnow()

        qr_code = QRCode(
            code=secrets.token_urlsafe(CODE_BYTES),
            user_id=user_id,
            is_active=True,
            expires_at=now + timedelta(minutes=ttl),
            created_at=now
        )
        db.session.add(qr_code)
        db.session.commit()

        current_app.logger.info(f"QR code {qr_code.id} issued for user {user_id} (ttl {ttl} min)")
        return qr_code

    def get_active_code(self, user_id: int) -> Optional[QRCode]:
        """Newest active, unexpired code for the user, if any."""
        return QRCode.query.filter(
            QRCode.user_id == user_id,
            QRCode.is_active.is_(True),
            QRCode.expires_at > datetime.utcnow()
        ).order_by(QRCode.created_at.desc(), QRCode.id.desc()).first()

    def revoke_code(self, user_id: int, code: str) -> QRCode:
        """Deactivate one of the user's own codes."""
        qr_code = QRCode.query.filter_by(code=code, user_id=user_id).first()
        if not qr_code:
            raise NotFoundError('QR code')

        qr_code.is_active = False
        db.session.commit()
        return qr_code

    def purge_expired(self, older_than_days: int = 30) -> int:
        """
        Delete codes that expired more than older_than_days ago.

        Returns:
            Number of deleted codes
        """
        cutoff = datetime.utcnow() - timedelta(days=older_than_days)
        deleted = QRCode.query.filter(QRCode.expires_at < cutoff).delete(
            synchronize_session=False
        )
        db.session.commit()

        current_app.logger.info(f"Purged {deleted} QR codes expired before {cutoff.isoformat()}")
        return deleted


qr_code_service = QRCodeService()
