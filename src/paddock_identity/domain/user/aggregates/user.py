"""User aggregate: identity, credentials and lifecycle state."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from paddock_identity.domain.shared.time import utc_now
from paddock_identity.domain.user.value_objects import Email, UserType
from paddock_identity.domain.user.views import PublicProfile, UserProfile


class User:
    """
    User aggregate root.

    Holds the password hash and the one-time lifecycle tokens. None of
    those ever leave the aggregate: callers outside the trust boundary get
    a UserProfile or PublicProfile instead.
    """

    def __init__(  # noqa: PLR0913
        self,
        email: Union[str, Email],
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: str | None = None,
        user_type: Union[str, UserType] = UserType.BUYER,
        business_name: str | None = None,
        is_verified: bool = False,
        verification_token: str | None = None,
        reset_password_token: str | None = None,
        reset_password_expires: datetime | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        if not password_hash:
            msg = "User requires a password hash"
            raise ValueError(msg)

        self._id = id or uuid4()
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._first_name = first_name
        self._last_name = last_name
        self._phone = phone
        self._user_type = (
            user_type if isinstance(user_type, UserType) else UserType(user_type)
        )
        self._business_name = business_name
        self._is_verified = is_verified
        self._verification_token = verification_token
        self._reset_password_token = reset_password_token
        self._reset_password_expires = reset_password_expires
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def phone(self) -> str | None:
        return self._phone

    @property
    def user_type(self) -> UserType:
        return self._user_type

    @property
    def business_name(self) -> str | None:
        return self._business_name

    @property
    def is_verified(self) -> bool:
        return self._is_verified

    @property
    def verification_token(self) -> str | None:
        return self._verification_token

    @property
    def reset_password_token(self) -> str | None:
        return self._reset_password_token

    @property
    def reset_password_expires(self) -> datetime | None:
        return self._reset_password_expires

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def has_active_reset_token(self, token: str, now: datetime) -> bool:
        """A reset token only counts while its expiry lies in the future."""
        return (
            self._reset_password_token is not None
            and self._reset_password_token == token
            and self._reset_password_expires is not None
            and self._reset_password_expires > now
        )

    def to_profile(self) -> UserProfile:
        return UserProfile(
            id=self._id,
            email=self.email,
            first_name=self._first_name,
            last_name=self._last_name,
            phone=self._phone,
            user_type=self._user_type,
            business_name=self._business_name,
            is_verified=self._is_verified,
            created_at=self._created_at,
            updated_at=self._updated_at,
        )

    def to_public_profile(self) -> PublicProfile:
        return PublicProfile(
            id=self._id,
            first_name=self._first_name,
            last_name=self._last_name,
            business_name=self._business_name,
            user_type=self._user_type,
        )

    @classmethod
    def register(  # noqa: PLR0913
        cls,
        email: Union[str, Email],
        password_hash: str,
        first_name: str,
        last_name: str,
        verification_token: str,
        phone: str | None = None,
        user_type: UserType = UserType.BUYER,
        business_name: str | None = None,
    ) -> "User":
        """Create a new, unverified user awaiting email verification."""
        return cls(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            user_type=user_type,
            business_name=business_name,
            is_verified=False,
            verification_token=verification_token,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"User(id={self._id}, email={self._email.value}, "
            f"user_type={self._user_type.value}, verified={self._is_verified})"
        )
