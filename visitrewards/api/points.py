"""
Points API endpoints.

Handles:
- Points balance
- Ledger history (paginated)
"""
from datetime import datetime
from flask import Blueprint, request, jsonify, g

from ..middleware.auth import require_auth
from ..services.points_service import points_service
from ..utils.errors import forbidden

points_bp = Blueprint('points', __name__)


def _target_user_id():
    """Caller's id, or ?user_id= for admins. None when not allowed."""
    user_id = request.args.get('user_id', type=int)
    if user_id and user_id != g.principal.user_id:
        return user_id if g.principal.is_admin else None
    return g.principal.user_id


@points_bp.route('/balance', methods=['GET'])
@require_auth
def get_points_balance():
    """
    Query params:
        user_id: Another user's balance (admin only)
    """
    user_id = _target_user_id()
    if user_id is None:
        return forbidden('Admin access required')

    return jsonify({
        'user_id': user_id,
        'points_balance': points_service.get_balance(user_id),
        'as_of': datetime.utcnow().isoformat()
    })


@points_bp.route('/history', methods=['GET'])
@require_auth
def get_points_history():
    """
    Query params:
        user_id: Another user's history (admin only)
        page: Page number (default 1)
        per_page: Items per page (default 20, max 100)
        transaction_type: Filter by type (earn, redeem, adjustment, expire)
    """
    user_id = _target_user_id()
    if user_id is None:
        return forbidden('Admin access required')

    result = points_service.get_history(
        user_id,
        page=request.args.get('page', 1, type=int),
        per_page=request.args.get('per_page', 20, type=int),
        transaction_type=request.args.get('transaction_type')
    )
    return jsonify(result)
