"""
Feedback (review) endpoints.
"""
from flask import Blueprint, request, jsonify, g

from ..middleware.auth import require_auth, require_admin
from ..services.review_service import review_service
from ..utils.errors import bad_request, ErrorCode

reviews_bp = Blueprint('reviews', __name__)


@reviews_bp.route('/eligibility', methods=['GET'])
@require_auth
def review_eligibility():
    return jsonify(review_service.check_eligibility(g.principal.user_id))


@reviews_bp.route('', methods=['POST'])
@require_auth
def submit_review():
    """
    JSON body:
        mood: 1-5 (required)
        comment: Optional free text
    """
    data = request.get_json(silent=True) or {}
    if 'mood' not in data:
        return bad_request('mood is required', ErrorCode.MISSING_FIELD)

    review = review_service.submit_review(
        g.principal.user_id, data['mood'], data.get('comment')
    )
    return jsonify({'review': review.to_dict()}), 201


@reviews_bp.route('/stats', methods=['GET'])
@require_auth
@require_admin
def review_stats():
    return jsonify(review_service.get_review_stats())
