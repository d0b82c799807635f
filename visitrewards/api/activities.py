"""
Activity catalog endpoints.
"""
from flask import Blueprint, request, jsonify, g

from ..middleware.auth import require_auth, require_admin
from ..services.activity_service import activity_service
from ..utils.errors import bad_request, ErrorCode

activities_bp = Blueprint('activities', __name__)


@activities_bp.route('', methods=['GET'])
@require_auth
def list_activities():
    """
    Query params:
        include_inactive: 'true' to include retired activities (admin only)
    """
    include_inactive = (
        request.args.get('include_inactive', 'false').lower() == 'true'
        and g.principal.is_admin
    )
    activities = activity_service.list_activities(include_inactive=include_inactive)
    return jsonify({
        'activities': [a.to_dict() for a in activities],
        'count': len(activities)
    })


@activities_bp.route('', methods=['POST'])
@require_auth
@require_admin
def create_activity():
    """
    JSON body:
        name: Unique activity name (required)
        points: Points awarded per visit (required)
        description: Optional
    """
    data = request.get_json(silent=True) or {}
    if 'name' not in data or 'points' not in data:
        return bad_request('name and points are required', ErrorCode.MISSING_FIELD)

    activity = activity_service.create_activity(
        data['name'], data['points'], data.get('description')
    )
    return jsonify({'activity': activity.to_dict()}), 201


@activities_bp.route('/<int:activity_id>/toggle', methods=['POST'])
@require_auth
@require_admin
def toggle_activity(activity_id):
    """
    JSON body:
        is_active: Target state (required)
    """
    data = request.get_json(silent=True) or {}
    if 'is_active' not in data:
        return bad_request('is_active is required', ErrorCode.MISSING_FIELD)
    if not isinstance(data['is_active'], bool):
        return bad_request('is_active must be a JSON boolean', ErrorCode.VALIDATION_ERROR)

    activity = activity_service.set_active(activity_id, data['is_active'])
    return jsonify({'activity': activity.to_dict()})


@activities_bp.route('/<int:activity_id>', methods=['PATCH'])
@require_auth
@require_admin
def update_activity_points(activity_id):
    data = request.get_json(silent=True) or {}
    if 'points' not in data:
        return bad_request('points is required', ErrorCode.MISSING_FIELD)

    activity = activity_service.update_points(activity_id, data['points'])
    return jsonify({'activity': activity.to_dict()})
