"""Identity exceptions and error codes.

This module defines the error taxonomy of the identity package. The
account lifecycle and session guard raise these typed failures; the
presentation layer maps each ErrorCode to a fixed HTTP status.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EMAIL = "INVALID_EMAIL"
    WEAK_PASSWORD = "WEAK_PASSWORD"  # noqa: S105
    INVALID_OR_EXPIRED_TOKEN = "INVALID_OR_EXPIRED_TOKEN"  # noqa: S105

    # Authentication Errors (401)
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EMAIL_NOT_VERIFIED = "EMAIL_NOT_VERIFIED"
    UNAUTHORIZED = "UNAUTHORIZED"

    # Authorization Errors (403)
    FORBIDDEN = "FORBIDDEN"

    # Not Found Errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Conflict Errors (409)
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class IdentityError(Exception):
    """Base exception for all identity errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class InvalidInputError(IdentityError):
    """Raised when request data is missing, malformed or violates policy."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class WeakPasswordInputError(InvalidInputError):
    """Raised when a new password does not meet the password policy."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class ConflictError(IdentityError):
    """Raised when an operation conflicts with an existing unique key."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.EMAIL_ALREADY_EXISTS,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class NotFoundError(IdentityError):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.USER_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class InvalidCredentialsError(IdentityError):
    """Raised when email or password is incorrect during login."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)


class EmailNotVerifiedError(IdentityError):
    """Raised on login with correct credentials for an unverified account."""

    def __init__(self, message: str = "Please verify your email before logging in"):
        super().__init__(message, ErrorCode.EMAIL_NOT_VERIFIED)


class InvalidOrExpiredTokenError(IdentityError):
    """Raised when a verification or reset token is unknown, used or expired."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, ErrorCode.INVALID_OR_EXPIRED_TOKEN)


class UnauthorizedError(IdentityError):
    """Raised when a caller cannot be authenticated.

    ``reason`` distinguishes the cause for diagnostics (missing_token,
    invalid_token, expired_token, unknown_user, unverified_user,
    wrong_password) and is never sent to the client.
    """

    def __init__(
        self,
        message: str = "Authentication required",
        reason: str = "missing_token",
    ):
        super().__init__(message, ErrorCode.UNAUTHORIZED, {"reason": reason})
        self.reason = reason


class ForbiddenError(IdentityError):
    """Raised when an authenticated caller lacks the required role."""

    def __init__(self, message: str = "Forbidden: insufficient permissions"):
        super().__init__(message, ErrorCode.FORBIDDEN)
