"""Identity application layer: use cases, ports and request context."""

from paddock_identity.application.context import UserContext
from paddock_identity.application.dtos import LoginResult, RegistrationData
from paddock_identity.application.ports import MailDispatcher
from paddock_identity.application.services import AccountService, SessionGuard

__all__ = [
    "AccountService",
    "LoginResult",
    "MailDispatcher",
    "RegistrationData",
    "SessionGuard",
    "UserContext",
]
