"""
Rewards API endpoints.

Handles:
- Reward catalog (list, create, toggle)
- Redemption
- Redemption history
"""
from flask import Blueprint, request, jsonify, g

from ..middleware.auth import require_auth, require_admin
from ..services.reward_service import reward_service
from ..utils.errors import bad_request, ErrorCode

rewards_bp = Blueprint('rewards', __name__)


@rewards_bp.route('', methods=['GET'])
@require_auth
def list_rewards():
    include_inactive = (
        request.args.get('include_inactive', 'false').lower() == 'true'
        and g.principal.is_admin
    )
    rewards = reward_service.list_rewards(include_inactive=include_inactive)
    return jsonify({
        'rewards': [r.to_dict() for r in rewards],
        'count': len(rewards)
    })


@rewards_bp.route('', methods=['POST'])
@require_auth
@require_admin
def create_reward():
    """
    JSON body:
        name: Reward name (required)
        points_cost: Points required (required)
        description: Optional
        available_quantity: Optional stock limit
    """
    data = request.get_json(silent=True) or {}
    if 'name' not in data or 'points_cost' not in data:
        return bad_request('name and points_cost are required', ErrorCode.MISSING_FIELD)

    reward = reward_service.create_reward(
        data['name'],
        data['points_cost'],
        description=data.get('description'),
        available_quantity=data.get('available_quantity')
    )
    return jsonify({'reward': reward.to_dict()}), 201


@rewards_bp.route('/<int:reward_id>/toggle', methods=['POST'])
@require_auth
@require_admin
def toggle_reward(reward_id):
    data = request.get_json(silent=True) or {}
    if 'is_active' not in data:
        return bad_request('is_active is required', ErrorCode.MISSING_FIELD)
    if not isinstance(data['is_active'], bool):
        return bad_request('is_active must be a JSON boolean', ErrorCode.VALIDATION_ERROR)

    reward = reward_service.set_active(reward_id, data['is_active'])
    return jsonify({'reward': reward.to_dict()})


@rewards_bp.route('/<int:reward_id>/redeem', methods=['POST'])
@require_auth
def redeem_reward(reward_id):
    """Redeem a reward with the caller's points."""
    redemption = reward_service.redeem_reward(g.principal.user_id, reward_id)
    return jsonify({
        'success': True,
        'redemption': redemption.to_dict(),
        'points_balance': g.current_user.points_balance
    }), 201


@rewards_bp.route('/redemptions', methods=['GET'])
@require_auth
def list_redemptions():
    redemptions = reward_service.list_redemptions(g.principal.user_id)
    return jsonify({
        'redemptions': [r.to_dict() for r in redemptions],
        'count': len(redemptions)
    })
