"""User profile schemas."""

from uuid import UUID

from pydantic import ConfigDict

from paddock.presentation.api.schemas.common import CamelModel, RequiredStr
from paddock_identity.domain.user import ProfileUpdate, PublicProfile


class UpdateProfileRequest(CamelModel):
    """Profile fields a user may change; anything else in the body is ignored."""

    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    business_name: str | None = None

    model_config = ConfigDict(extra="ignore")

    def to_update(self) -> ProfileUpdate:
        return ProfileUpdate(
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
            business_name=self.business_name,
        )


class ChangePasswordRequest(CamelModel):
    """Request schema for changing a user's password."""

    current_password: RequiredStr
    new_password: RequiredStr


class PublicProfileResponse(CamelModel):
    """What anyone may see about a user."""

    id: UUID
    first_name: str
    last_name: str
    business_name: str | None = None
    user_type: str

    @classmethod
    def from_profile(cls, profile: PublicProfile) -> "PublicProfileResponse":
        return cls(
            id=profile.id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            business_name=profile.business_name,
            user_type=profile.user_type.value,
        )
