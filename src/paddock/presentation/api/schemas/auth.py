"""Authentication schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from paddock.presentation.api.schemas.common import CamelModel, RequiredStr
from paddock_identity.application.dtos import LoginResult
from paddock_identity.domain.user import UserProfile


class RegisterRequest(CamelModel):
    """Request schema for user registration."""

    email: RequiredStr = Field(..., description="User's email address")
    password: RequiredStr = Field(..., description="Password (at least 8 characters)")
    first_name: RequiredStr
    last_name: RequiredStr
    phone: str | None = None
    user_type: str | None = Field(
        default=None,
        description="buyer (default) or seller",
    )
    business_name: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "alice@example.com",
                "password": "Password123",
                "firstName": "Alice",
                "lastName": "Rider",
                "userType": "seller",
                "businessName": "Hilltop Stables",
            },
        },
    )


class LoginRequest(CamelModel):
    """Request schema for user login."""

    email: RequiredStr
    password: RequiredStr

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "alice@example.com",
                "password": "Password123",
            },
        },
    )


class EmailRequest(CamelModel):
    """Request schema carrying only an email (forgot password, resend)."""

    email: RequiredStr


class ResetPasswordRequest(CamelModel):
    """Request schema for resetting a password with a token."""

    token: RequiredStr
    new_password: RequiredStr


class UserResponse(CamelModel):
    """Sanitized user as seen by its owner."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    phone: str | None = None
    user_type: str
    business_name: str | None = None
    is_verified: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "UserResponse":
        return cls(
            id=profile.id,
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            phone=profile.phone,
            user_type=profile.user_type.value,
            business_name=profile.business_name,
            is_verified=profile.is_verified,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class AuthResponse(CamelModel):
    """Response schema for a successful login."""

    user: UserResponse
    token: str
    token_type: str = Field(default="bearer")
    expires_in: int

    @classmethod
    def from_result(cls, result: LoginResult) -> "AuthResponse":
        return cls(
            user=UserResponse.from_profile(result.user),
            token=result.access_token,
            token_type=result.token_type,
            expires_in=result.expires_in,
        )
