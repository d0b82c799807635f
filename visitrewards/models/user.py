"""
User model.
"""
import secrets
from datetime import datetime
from ..extensions import db


def generate_api_token() -> str:
    return secrets.token_hex(32)


class User(db.Model):
    """
    Loyalty program user (app account).

    points_balance is a cache of the ledger sum, kept in step by
    PointsService.process_points_transaction.
    """
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    display_name = db.Column(db.String(100))

    # Bearer credential used by the mobile client
    api_token = db.Column(db.String(64), unique=True, nullable=False, default=generate_api_token)
    is_admin = db.Column(db.Boolean, default=False, nullable=False)

    # Cached points
    points_balance = db.Column(db.Integer, default=0, nullable=False)
    lifetime_points_earned = db.Column(db.Integer, default=0, nullable=False)
    lifetime_points_spent = db.Column(db.Integer, default=0, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    qr_codes = db.relationship('QRCode', backref='user', lazy='dynamic')
    visits = db.relationship(
        'Visit', backref='user', lazy='dynamic', foreign_keys='Visit.user_id'
    )

    def __repr__(self):
        return f'<User {self.id}: {self.email}>'

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'display_name': self.display_name,
            'is_admin': self.is_admin,
            'points_balance': self.points_balance,
            'lifetime_points_earned': self.lifetime_points_earned,
            'lifetime_points_spent': self.lifetime_points_spent,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
