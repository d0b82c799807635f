"""
Standardized error response utilities for the Visit Rewards API.

Provides consistent error response format across all endpoints:
{
    "error": {
        "message": "User-friendly error message",
        "code": "ERROR_CODE"
    }
}

Usage:
    from visitrewards.utils.errors import error_response, ErrorCode

    return error_response("User not found", ErrorCode.NOT_FOUND, 404)
"""
import logging
from enum import Enum
from flask import Flask, jsonify
from typing import Optional
from werkzeug.exceptions import HTTPException

from .exceptions import (
    LoyaltyError,
    UnauthorizedError,
    InvalidActivityError,
    InvalidOrExpiredCodeError,
    NotFoundError,
    ValidationError,
    InsufficientPointsError,
    DuplicateError,
    ReviewNotAllowedError,
)

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    # Authentication & Authorization (401, 403)
    AUTH_REQUIRED = "AUTH_REQUIRED"
    INVALID_TOKEN = "INVALID_TOKEN"
    PERMISSION_DENIED = "PERMISSION_DENIED"

    # Validation Errors (400)
    INVALID_REQUEST = "INVALID_REQUEST"
    MISSING_FIELD = "MISSING_FIELD"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Not Found (404)
    NOT_FOUND = "NOT_FOUND"

    # Conflict (409)
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"

    # Server Errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Business exception -> HTTP status
STATUS_BY_EXCEPTION = [
    (UnauthorizedError, 403),
    (InvalidActivityError, 400),
    (InvalidOrExpiredCodeError, 400),
    (NotFoundError, 404),
    (ValidationError, 400),
    (InsufficientPointsError, 400),
    (DuplicateError, 409),
    (ReviewNotAllowedError, 409),
]


def error_response(
    message: str,
    code: ErrorCode = ErrorCode.INTERNAL_ERROR,
    status_code: int = 500,
    log_error: bool = True,
    details: Optional[dict] = None
) -> tuple:
    """
    Create a standardized error response.

    Args:
        message: User-friendly error message
        code: Error code from ErrorCode enum (or a raw string code)
        status_code: HTTP status code
        log_error: Whether to log the error
        details: Optional additional details (only logged, not returned to user)

    Returns:
        Tuple of (response, status_code) for Flask
    """
    if log_error and status_code >= 500:
        logger.error(f"API Error [{code}]: {message}", extra={"details": details})
    elif log_error and status_code >= 400:
        logger.warning(f"API Error [{code}]: {message}", extra={"details": details})

    response = {
        "error": {
            "message": message,
            "code": code.value if isinstance(code, ErrorCode) else code
        }
    }

    return jsonify(response), status_code


def bad_request(message: str, code: ErrorCode = ErrorCode.INVALID_REQUEST) -> tuple:
    """400 Bad Request error."""
    return error_response(message, code, 400, log_error=False)


def unauthorized(message: str = "Authentication required", code: ErrorCode = ErrorCode.AUTH_REQUIRED) -> tuple:
    """401 Unauthorized error."""
    return error_response(message, code, 401, log_error=False)


def forbidden(message: str = "Permission denied", code: ErrorCode = ErrorCode.PERMISSION_DENIED) -> tuple:
    """403 Forbidden error."""
    return error_response(message, code, 403, log_error=False)


def not_found(message: str, code: ErrorCode = ErrorCode.NOT_FOUND) -> tuple:
    """404 Not Found error."""
    return error_response(message, code, 404, log_error=False)


def internal_error(message: str = "An unexpected error occurred", details: Optional[dict] = None) -> tuple:
    """500 Internal Server Error."""
    return error_response(message, ErrorCode.INTERNAL_ERROR, 500, log_error=True, details=details)


def status_for(error: LoyaltyError) -> int:
    """HTTP status for a business exception."""
    for exc_type, status in STATUS_BY_EXCEPTION:
        if isinstance(error, exc_type):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    """Register error handlers."""

    @app.errorhandler(LoyaltyError)
    def loyalty_error(error):
        status = status_for(error)
        return error_response(error.message, error.code, status, log_error=True)

    @app.errorhandler(HTTPException)
    def http_error(error):
        return error_response(
            error.description or error.name,
            error.name.upper().replace(' ', '_'),
            error.code,
            log_error=False
        )

    @app.errorhandler(Exception)
    def unhandled_error(error):
        logger.exception('Unhandled error: %s', error)
        return internal_error(details={'type': type(error).__name__})
