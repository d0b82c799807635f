"""
Activity model - point-valued visit categories.
"""
from datetime import datetime
from ..extensions import db


class Activity(db.Model):
    """
    A named, point-valued visit type (e.g. 'gym', 'sauna').

    Only active activities can be used when accepting a visit. Retired
    activities are deactivated, never deleted, so old ledger metadata
    still resolves.
    """
    __tablename__ = 'activities'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    points = db.Column(db.Integer, nullable=False, default=0)
    description = db.Column(db.String(500))
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f'<Activity {self.name}: {self.points} pts>'

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'points': self.points,
            'description': self.description,
            'is_active': self.is_active,
        }
