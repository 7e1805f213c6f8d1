"""Authentication services.

Provides password hashing, session tokens and opaque one-time tokens.
"""

from paddock_auth.services.jwt_service import JWTService
from paddock_auth.services.opaque_token_service import OpaqueTokenService
from paddock_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTService",
    "OpaqueTokenService",
]
