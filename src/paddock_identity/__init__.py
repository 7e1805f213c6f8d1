"""Paddock Identity - Marketplace accounts, credentials and sessions.

This package handles all identity-related concerns:
- User accounts (registration, email verification, profiles)
- Authentication (login, session tokens)
- Authorization (user type based access control)
- Password management (change, reset)
- Email notifications (verification, password reset)

Marketplace features (listings, messaging, payments) only reference
user_id, keeping identity concerns separated.
"""

from paddock_identity.application.context import UserContext
from paddock_identity.application.dtos import LoginResult, RegistrationData
from paddock_identity.application.ports import MailDispatcher
from paddock_identity.application.services import AccountService, SessionGuard
from paddock_identity.domain.user import (
    CredentialStore,
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserTypeError,
    ProfileUpdate,
    PublicProfile,
    User,
    UserChanges,
    UserNotFoundError,
    UserProfile,
    UserType,
)
from paddock_identity.exceptions import (
    ConflictError,
    EmailNotVerifiedError,
    ErrorCode,
    ForbiddenError,
    IdentityError,
    InvalidCredentialsError,
    InvalidInputError,
    InvalidOrExpiredTokenError,
    NotFoundError,
    UnauthorizedError,
    WeakPasswordInputError,
)

__all__ = [
    # Domain - User
    "CredentialStore",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidUserTypeError",
    "ProfileUpdate",
    "PublicProfile",
    "User",
    "UserChanges",
    "UserNotFoundError",
    "UserProfile",
    "UserType",
    # Exceptions
    "ConflictError",
    "EmailNotVerifiedError",
    "ErrorCode",
    "ForbiddenError",
    "IdentityError",
    "InvalidCredentialsError",
    "InvalidInputError",
    "InvalidOrExpiredTokenError",
    "NotFoundError",
    "UnauthorizedError",
    "WeakPasswordInputError",
    # Application
    "AccountService",
    "LoginResult",
    "MailDispatcher",
    "RegistrationData",
    "SessionGuard",
    "UserContext",
]
