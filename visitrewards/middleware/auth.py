"""
Bearer token authentication.

Resolves the calling user from the Authorization header and stores an
explicit Principal on flask.g. Services take the principal as an argument
instead of reading session state.
"""
from dataclasses import dataclass
from functools import wraps
from flask import request, g

from ..models import User
from ..utils.errors import unauthorized, forbidden, ErrorCode


@dataclass(frozen=True)
class Principal:
    """The authenticated actor behind a request."""
    user_id: int
    is_admin: bool = False

    @classmethod
    def from_user(cls, user: User) -> 'Principal':
        return cls(user_id=user.id, is_admin=bool(user.is_admin))


def get_token_from_request() -> str | None:
    """
    Get the bearer token from the Authorization header.

    Returns:
        Token string or None
    """
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


def require_auth(f):
    """
    Decorator to require an authenticated user.

    Sets g.current_user and g.principal.

    Usage:
        @require_auth
        def my_endpoint():
            principal = g.principal
            ...
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = get_token_from_request()
        if not token:
            return unauthorized('Missing bearer token')

        user = User.query.filter_by(api_token=token).first()
        if not user:
            return unauthorized('Invalid token', ErrorCode.INVALID_TOKEN)

        g.current_user = user
        g.principal = Principal.from_user(user)

        return f(*args, **kwargs)

    return decorated_function


def require_admin(f):
    """
    Decorator to require an administrator. Must be used after @require_auth.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        principal = getattr(g, 'principal', None)
        if principal is None:
            return unauthorized()
        if not principal.is_admin:
            return forbidden('Admin access required')
        return f(*args, **kwargs)

    return decorated_function
