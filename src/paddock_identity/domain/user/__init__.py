"""User domain manages marketplace identity and credentials.

This domain handles:
- User aggregate (identity, password hash, lifecycle tokens)
- Sanitized views (owner profile, public profile)
- The credential store interface
"""

from paddock_identity.domain.user.aggregates import User
from paddock_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserTypeError,
    UserNotFoundError,
)
from paddock_identity.domain.user.repositories import (
    UNSET,
    CredentialStore,
    UserChanges,
)
from paddock_identity.domain.user.value_objects import (
    Email,
    ProfileUpdate,
    UserType,
)
from paddock_identity.domain.user.views import PublicProfile, UserProfile

__all__ = [
    "UNSET",
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
]
