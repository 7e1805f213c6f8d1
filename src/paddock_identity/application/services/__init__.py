"""Application services for identity management."""

from paddock_identity.application.services.account_service import (
    DEFAULT_RESET_TOKEN_TTL,
    AccountService,
)
from paddock_identity.application.services.session_guard import SessionGuard

__all__ = ["DEFAULT_RESET_TOKEN_TTL", "AccountService", "SessionGuard"]
