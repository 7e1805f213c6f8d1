from dataclasses import dataclass
from typing import Union

from paddock_identity.domain.user import UserProfile, UserType


@dataclass(frozen=True)
class RegistrationData:
    """Everything a visitor supplies to open an account."""

    email: str
    password: str
    first_name: str
    last_name: str
    phone: str | None = None
    user_type: Union[str, UserType, None] = None
    business_name: str | None = None

    def __repr__(self) -> str:
        return (
            f"RegistrationData(email={self.email!r}, "
            f"user_type={self.user_type!r}, password='***')"
        )


@dataclass(frozen=True)
class LoginResult:
    """Sanitized user plus the session token issued for it."""

    user: UserProfile
    access_token: str
    expires_in: int
    token_type: str = "bearer"  # noqa: S105
