"""Paddock Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the marketplace domain. It handles:
- Password hashing (bcrypt)
- Session token creation and verification (JWT)
- Opaque one-time tokens (email verification, password reset)

Architecture:
    paddock_auth/
    ├── services/           # Pure logic (password hashing, tokens)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from paddock_auth import JWTService, OpaqueTokenService, PasswordHashingService
"""

from paddock_auth.exceptions import (
    AuthError,
    ExpiredTokenError,
    InvalidTokenError,
    WeakPasswordError,
)
from paddock_auth.schemas import TokenPayload
from paddock_auth.services import (
    JWTService,
    OpaqueTokenService,
    PasswordHashingService,
)

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    "OpaqueTokenService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "ExpiredTokenError",
    "InvalidTokenError",
    "WeakPasswordError",
]
