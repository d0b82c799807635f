"""
Visit API endpoints.

Handles:
- Accepting a scanned QR code as a visit (admin)
- Listing visits
"""
from flask import Blueprint, request, jsonify, g

from ..middleware.auth import require_auth
from ..services.visit_service import visit_service
from ..utils.errors import bad_request, forbidden, ErrorCode

visits_bp = Blueprint('visits', __name__)


@visits_bp.route('/accept', methods=['POST'])
@require_auth
def accept_visit():
    """
    Accept a visit for the owner of a scanned QR code.

    JSON body:
        code: Scanned QR code value (required)
        activity_name: Activity to credit (required)

    Returns:
        201 with the created visit. Admin-only; the check happens in the service.
    """
    data = request.get_json(silent=True) or {}

    code = data.get('code')
    activity_name = data.get('activity_name')
    if not code or not activity_name:
        return bad_request('code and activity_name are required', ErrorCode.MISSING_FIELD)

    visit = visit_service.accept_visit(g.principal, str(code), str(activity_name))

    return jsonify({
        'success': True,
        'visit': visit.to_dict(),
    }), 201


@visits_bp.route('', methods=['GET'])
@require_auth
def list_visits():
    """
    Recent visits of the caller.

    Query params:
        user_id: Another user's visits (admin only)
        limit: Max results (default 50, max 200)
    """
    user_id = request.args.get('user_id', type=int)
    if user_id and user_id != g.principal.user_id and not g.principal.is_admin:
        return forbidden('Admin access required')

    limit = min(request.args.get('limit', 50, type=int), 200)
    visits = visit_service.list_visits(user_id or g.principal.user_id, limit=limit)

    return jsonify({
        'visits': [v.to_dict() for v in visits],
        'count': len(visits)
    })
