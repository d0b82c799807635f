"""
Points transaction model - the loyalty ledger.
"""
from datetime import datetime
from ..extensions import db


TRANSACTION_TYPES = {
    'earn': 'Points earned',
    'redeem': 'Points redeemed',
    'adjustment': 'Manual adjustment',
    'expire': 'Points expired',
}


class PointsTransaction(db.Model):
    """
    Tracks all points earned, redeemed, and adjusted.

    Used for:
    - Visit points (earn)
    - Reward redemptions (redeem)
    - Admin adjustments
    """
    __tablename__ = 'points_transactions'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)

    points = db.Column(db.Integer, nullable=False)  # Positive for earn, negative for spend
    transaction_type = db.Column(db.String(50), nullable=False)  # earn, redeem, adjustment, expire
    description = db.Column(db.String(500))
    balance_after = db.Column(db.Integer)

    # 'metadata' is reserved on declarative models
    details = db.Column('metadata', db.JSON, default=dict)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    user = db.relationship('User', backref=db.backref('points_transactions', lazy='dynamic'))

    def __repr__(self):
        return f'<PointsTransaction {self.id}: {self.points} pts for user {self.user_id}>'

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'points': self.points,
            'transaction_type': self.transaction_type,
            'description': self.description,
            'balance_after': self.balance_after,
            'metadata': self.details or {},
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
