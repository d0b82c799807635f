"""
Mood-based feedback model.
"""
from datetime import datetime
from ..extensions import db


MOOD_MIN = 1
MOOD_MAX = 5


class Review(db.Model):
    """User feedback: a 1-5 mood score and an optional comment."""
    __tablename__ = 'reviews'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    mood = db.Column(db.Integer, nullable=False)
    comment = db.Column(db.String(1000))

    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    def __repr__(self):
        return f'<Review {self.id}: mood {self.mood}>'

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'mood': self.mood,
            'comment': self.comment,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
