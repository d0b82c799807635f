"""
Admin API routes: admin check and dashboard statistics.
"""
from flask import Blueprint, jsonify, g

from ..middleware.auth import require_auth, require_admin
from ..services.stats_service import stats_service
from ..services.review_service import review_service

admin_bp = Blueprint('admin', __name__)


@admin_bp.route('/status', methods=['GET'])
@require_auth
def admin_status():
    """Whether the caller is an administrator. Used by the client to show admin UI."""
    return jsonify({'is_admin': g.principal.is_admin})


@admin_bp.route('/stats', methods=['GET'])
@require_auth
@require_admin
def admin_stats():
    """
    Dashboard aggregates.

    Returns:
        visits_count, rewards_used, points_awarded, capacity_percentage
    """
    return jsonify(stats_service.get_admin_stats())


@admin_bp.route('/dashboard', methods=['GET'])
@require_auth
@require_admin
def admin_dashboard():
    """Admin stats and feedback stats in one call."""
    return jsonify({
        'stats': stats_service.get_admin_stats(),
        'reviews': review_service.get_review_stats(),
    })
