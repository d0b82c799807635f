"""
Review Service - mood-based feedback.

Users can only submit feedback if they had a points transaction within the
review window (REVIEW_WINDOW_HOURS, 24h by default) and have not already
submitted a review within that same window.
"""

from datetime import datetime, timedelta
from typing import Dict, Any

from flask import current_app
from sqlalchemy import func

from ..extensions import db
from ..models import User, PointsTransaction, Review
from ..models.review import MOOD_MIN, MOOD_MAX
from ..utils.exceptions import ValidationError, UserNotFoundError, ReviewNotAllowedError

MAX_COMMENT_LENGTH = 1000


class ReviewService:
    """
    Usage:
        service = ReviewService()
        if service.check_eligibility(user_id)['eligible']:
            service.submit_review(user_id, mood=4, comment='Great class')
    """

    @property
    def window_hours(self) -> int:
        return current_app.config.get('REVIEW_WINDOW_HOURS', 24)

    def check_eligibility(self, user_id: int) -> Dict[str, Any]:
        """
        Returns a dict with:
        - eligible: bool
        - reason: str
        - criteria: per-check results
        """
        if not db.session.get(User, user_id):
            raise UserNotFoundError(user_id)

        since = datetime.utcnow() - timedelta(hours=self.window_hours)

        recent_transactions = PointsTransaction.query.filter(
            PointsTransaction.user_id == user_id,
            PointsTransaction.created_at >= since
        ).count()

        recent_reviews = Review.query.filter(
            Review.user_id == user_id,
            Review.created_at >= since
        ).count()

        criteria = {
            'recent_transaction': {
                'passed': recent_transactions > 0,
                'value': recent_transactions,
            },
            'no_recent_review': {
                'passed': recent_reviews == 0,
                'value': recent_reviews,
            },
        }

        if not criteria['recent_transaction']['passed']:
            reason = f'No transaction in the last {self.window_hours} hours'
        elif not criteria['no_recent_review']['passed']:
            reason = f'Feedback already submitted in the last {self.window_hours} hours'
        else:
            reason = 'Eligible to submit feedback'

        return {
            'eligible': all(c['passed'] for c in criteria.values()),
            'reason': reason,
            'criteria': criteria,
            'window_hours': self.window_hours,
        }

    def submit_review(self, user_id: int, mood, comment: str = None) -> Review:
        """
        Raises:
            ValidationError: mood outside 1-5 or comment too long
            ReviewNotAllowedError: user is not currently eligible
        """
        if isinstance(mood, bool) or not isinstance(mood, int) or not MOOD_MIN <= mood <= MOOD_MAX:
            raise ValidationError(f'Mood must be an integer between {MOOD_MIN} and {MOOD_MAX}', 'mood')

        if comment is not None:
            comment = comment.strip() or None
        if comment and len(comment) > MAX_COMMENT_LENGTH:
            raise ValidationError(f'Comment must be at most {MAX_COMMENT_LENGTH} characters', 'comment')

        eligibility = self.check_eligibility(user_id)
        if not eligibility['eligible']:
            raise ReviewNotAllowedError(eligibility['reason'])

        review = Review(user_id=user_id, mood=mood, comment=comment)
        db.session.add(review)
        db.session.commit()

        current_app.logger.info(f"Review {review.id} submitted by user {user_id} (mood {mood})")
        return review

    def get_review_stats(self) -> Dict[str, Any]:
        """Totals, average mood and per-mood counts across all reviews."""
        rows = db.session.query(
            Review.mood, func.count(Review.id)
        ).group_by(Review.mood).all()

        distribution = {mood: 0 for mood in range(MOOD_MIN, MOOD_MAX + 1)}
        for mood, count in rows:
            distribution[mood] = count

        total = sum(distribution.values())
        average = (
            sum(mood * count for mood, count in distribution.items()) / total
            if total else 0.0
        )

        return {
            'total_reviews': total,
            'average_mood': round(average, 2),
            'mood_distribution': distribution,
        }


review_service = ReviewService()
