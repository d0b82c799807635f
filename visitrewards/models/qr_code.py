"""
QR code model.
"""
from datetime import datetime
from ..extensions import db


class QRCode(db.Model):
    """
    Opaque redeemable token bound to a user.

    Redeemable while is_active and before expires_at. Accepting a visit
    does not consume the code; it stays valid until it expires or is
    revoked (see QR_SINGLE_USE).
    """
    __tablename__ = 'qr_codes'

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(64), unique=True, nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)

    is_active = db.Column(db.Boolean, default=True, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<QRCode {self.id} for user {self.user_id}>'

    def is_redeemable(self, now: datetime = None) -> bool:
        now = now or datetime.utcnow()
        return bool(self.is_active) and self.expires_at > now

    def to_dict(self):
        return {
            'code': self.code,
            'user_id': self.user_id,
            'is_active': self.is_active,
            'expires_at': self.expires_at.isoformat() if self.expires_at else None,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
