"""Credential store interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union
from uuid import UUID

from paddock_identity.domain.user.aggregates.user import User
from paddock_identity.domain.user.value_objects.email import Email


class _Unset(Enum):
    UNSET = "UNSET"


UNSET = _Unset.UNSET


@dataclass(frozen=True)
class UserChanges:
    """Partial update of a user's mutable fields.

    Fields left at ``UNSET`` are not touched; ``None`` clears a nullable
    field. Identity (id, email, user_type) and audit fields are not
    mutable through this path.
    """

    password_hash: Union[str, _Unset] = UNSET
    first_name: Union[str, _Unset] = UNSET
    last_name: Union[str, _Unset] = UNSET
    phone: Union[str, None, _Unset] = UNSET
    business_name: Union[str, None, _Unset] = UNSET
    is_verified: Union[bool, _Unset] = UNSET
    verification_token: Union[str, None, _Unset] = UNSET
    reset_password_token: Union[str, None, _Unset] = UNSET
    reset_password_expires: Union[datetime, None, _Unset] = UNSET

    def as_dict(self) -> dict[str, Any]:
        """Only the fields that were explicitly set."""
        return {
            field.name: value
            for field in fields(self)
            if (value := getattr(self, field.name)) is not UNSET
        }


class CredentialStore(ABC):
    """Repository interface for User aggregates and their credentials."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address (exact, case-sensitive)."""

    @abstractmethod
    async def find_by_verification_token(self, token: str) -> Optional[User]:
        """Find the user holding a pending email verification token."""

    @abstractmethod
    async def find_by_active_reset_token(
        self,
        token: str,
        now: datetime,
    ) -> Optional[User]:
        """Find the user holding a reset token that expires after ``now``."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user.

        Raises EmailAlreadyExistsError if the email is taken.
        """

    @abstractmethod
    async def update(self, user_id: UUID, changes: UserChanges) -> User:
        """Apply changes, stamp updated_at and return the full record.

        Raises UserNotFoundError if no user has this id.
        """
