"""
QR code endpoints for the signed-in user.
"""
from flask import Blueprint, jsonify, g

from ..middleware.auth import require_auth
from ..services.qr_service import qr_code_service
from ..utils.errors import not_found

qr_codes_bp = Blueprint('qr_codes', __name__)


@qr_codes_bp.route('', methods=['POST'])
@require_auth
def issue_qr_code():
    """Issue a new short-lived code for the caller to show at the venue."""
    qr_code = qr_code_service.issue_code(g.principal.user_id)
    return jsonify({'qr_code': qr_code.to_dict()}), 201


@qr_codes_bp.route('/current', methods=['GET'])
@require_auth
def current_qr_code():
    qr_code = qr_code_service.get_active_code(g.principal.user_id)
    if not qr_code:
        return not_found('No active QR code')
    return jsonify({'qr_code': qr_code.to_dict()})


@qr_codes_bp.route('/<code>/revoke', methods=['POST'])
@require_auth
def revoke_qr_code(code):
    qr_code = qr_code_service.revoke_code(g.principal.user_id, code)
    return jsonify({'qr_code': qr_code.to_dict()})
