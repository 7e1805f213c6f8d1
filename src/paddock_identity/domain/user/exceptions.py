"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from paddock_identity.exceptions import (
    ConflictError,
    ErrorCode,
    InvalidInputError,
    NotFoundError,
)


class InvalidEmailError(InvalidInputError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_EMAIL)


class InvalidUserTypeError(InvalidInputError):
    """Raised when a user type is unknown or not allowed for self-registration."""

    def __init__(self, user_type: str) -> None:
        self.user_type = user_type
        super().__init__(f"Invalid user type: {user_type}")


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "User with this email already exists",
            details={"email": email},
        )


class UserNotFoundError(NotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__("User not found", details={"user_id": user_id})
