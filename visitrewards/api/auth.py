"""
Current-user endpoints.
"""
from flask import Blueprint, jsonify, g

from ..middleware.auth import require_auth

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/me', methods=['GET'])
@require_auth
def get_me():
    """Profile of the authenticated user, including admin status."""
    return jsonify({'user': g.current_user.to_dict()})
