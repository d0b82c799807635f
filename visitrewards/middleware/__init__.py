"""
Middleware package for the Visit Rewards API.
"""
from .auth import Principal, require_auth, require_admin, get_token_from_request
from .request_id import init_request_id_tracking

__all__ = [
    'Principal',
    'require_auth',
    'require_admin',
    'get_token_from_request',
    'init_request_id_tracking',
]
