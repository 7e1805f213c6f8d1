"""Authentication exceptions.

These exceptions are raised by the paddock_auth package and should be
caught and translated by the application layer (AccountService,
SessionGuard).
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a session token is invalid or malformed."""

    reason = "invalid_token"

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ExpiredTokenError(InvalidTokenError):
    """Raised when a session token has a valid signature but is expired."""

    reason = "expired_token"

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)
