"""
Custom exceptions for Visit Rewards business logic.

Services raise these instead of returning error dicts. Each carries a
machine-readable code that the API error handler maps to an HTTP status.
"""


class LoyaltyError(Exception):
    """Base exception for all loyalty business logic errors."""

    def __init__(self, message: str, code: str = "LOYALTY_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class UnauthorizedError(LoyaltyError):
    """Caller lacks the privilege the operation requires."""

    def __init__(self, message: str = "Unauthorized: Admin access required"):
        super().__init__(message, "PERMISSION_DENIED")


class InvalidActivityError(LoyaltyError):
    """No active activity matches the requested name."""

    def __init__(self, activity_name: str = None):
        self.activity_name = activity_name
        super().__init__("Invalid activity type", "INVALID_ACTIVITY")


class InvalidOrExpiredCodeError(LoyaltyError):
    """No active, unexpired QR code matches the scanned value."""

    def __init__(self):
        super().__init__("Invalid or expired QR code", "INVALID_OR_EXPIRED_CODE")


class NotFoundError(LoyaltyError):
    """Resource not found."""

    def __init__(self, resource: str, identifier=None):
        message = f"{resource} not found"
        if identifier:
            message = f"{resource} with ID {identifier} not found"
        super().__init__(message, f"{resource.upper()}_NOT_FOUND")


class UserNotFoundError(NotFoundError):
    """User not found."""

    def __init__(self, identifier=None):
        super().__init__("User", identifier)


class ValidationError(LoyaltyError):
    """Invalid input data."""

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"INVALID_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)


class InsufficientPointsError(LoyaltyError):
    """Not enough points for the operation."""

    def __init__(self, current: int, required: int):
        self.current = current
        self.required = required
        message = f"Insufficient points. Current: {current}, Required: {required}"
        super().__init__(message, "INSUFFICIENT_POINTS")


class DuplicateError(LoyaltyError):
    """Resource already exists."""

    def __init__(self, resource: str, identifier=None):
        message = f"{resource} already exists"
        if identifier:
            message = f"{resource} with {identifier} already exists"
        super().__init__(message, "DUPLICATE_ENTRY")


class ReviewNotAllowedError(LoyaltyError):
    """User is not currently eligible to leave feedback."""

    def __init__(self, message: str):
        super().__init__(message, "REVIEW_NOT_ALLOWED")
