"""Request and response schemas of the HTTP API."""

from paddock.presentation.api.schemas.auth import (
    AuthResponse,
    EmailRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    UserResponse,
)
from paddock.presentation.api.schemas.common import CamelModel, MessageResponse
from paddock.presentation.api.schemas.users import (
    ChangePasswordRequest,
    PublicProfileResponse,
    UpdateProfileRequest,
)

__all__ = [
    "AuthResponse",
    "CamelModel",
    "ChangePasswordRequest",
    "EmailRequest",
    "LoginRequest",
    "MessageResponse",
    "PublicProfileResponse",
    "RegisterRequest",
    "ResetPasswordRequest",
    "UpdateProfileRequest",
    "UserResponse",
]
