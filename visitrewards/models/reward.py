"""
Reward catalog and redemption models.
"""
from datetime import datetime
from ..extensions import db


class Reward(db.Model):
    """
    Redeemable reward. Costs points_cost points; optional stock limit.
    """
    __tablename__ = 'rewards'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(1000))
    points_cost = db.Column(db.Integer, nullable=False)

    available_quantity = db.Column(db.Integer)  # null = unlimited
    redeemed_quantity = db.Column(db.Integer, default=0, nullable=False)

    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<Reward {self.name}: {self.points_cost} pts>'

    def remaining_quantity(self):
        """Remaining stock, or None when unlimited."""
        if self.available_quantity is None:
            return None
        return max(self.available_quantity - (self.redeemed_quantity or 0), 0)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'points_cost': self.points_cost,
            'available_quantity': self.available_quantity,
            'remaining_quantity': self.remaining_quantity(),
            'is_active': self.is_active,
        }


class RewardRedemption(db.Model):
    """
    A completed reward redemption, linked to its ledger entry.
    """
    __tablename__ = 'reward_redemptions'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    reward_id = db.Column(db.Integer, db.ForeignKey('rewards.id'), nullable=False)
    transaction_id = db.Column(db.Integer, db.ForeignKey('points_transactions.id'))

    points_spent = db.Column(db.Integer, nullable=False)
    status = db.Column(db.String(20), default='completed', nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    reward = db.relationship('Reward', backref=db.backref('redemptions', lazy='dynamic'))

    def __repr__(self):
        return f'<RewardRedemption {self.id}: reward {self.reward_id} by user {self.user_id}>'

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'reward_id': self.reward_id,
            'reward_name': self.reward.name if self.reward else None,
            'points_spent': self.points_spent,
            'status': self.status,
            'transaction_id': self.transaction_id,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
