"""
Visit model.
"""
from datetime import datetime
from ..extensions import db


class Visit(db.Model):
    """
    A user's accepted venue visit. Created once per accepted QR scan,
    never updated or deleted afterwards.
    """
    __tablename__ = 'visits'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    activity_id = db.Column(db.Integer, db.ForeignKey('activities.id'))
    accepted_by_id = db.Column(db.Integer, db.ForeignKey('users.id'))

    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    activity = db.relationship('Activity')

    def __repr__(self):
        return f'<Visit {self.id} for user {self.user_id}>'

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'activity_id': self.activity_id,
            'activity_name': self.activity.name if self.activity else None,
            'accepted_by_id': self.accepted_by_id,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
