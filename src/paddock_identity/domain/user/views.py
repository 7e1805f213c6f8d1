"""Read-only views of a User that are safe to hand across the trust boundary."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from paddock_identity.domain.user.value_objects.user_type import UserType


@dataclass(frozen=True)
class UserProfile:
    """Sanitized view of a user for the account owner.

    Has no password hash, verification token or reset token fields.
    """

    id: UUID
    email: str
    first_name: str
    last_name: str
    phone: str | None
    user_type: UserType
    business_name: str | None
    is_verified: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PublicProfile:
    """What anyone may see about a user, authenticated or not."""

    id: UUID
    first_name: str
    last_name: str
    business_name: str | None
    user_type: UserType
