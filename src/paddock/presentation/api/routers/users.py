"""User router: own profile, password change and public profiles."""

import logging
from uuid import UUID

from fastapi import APIRouter

from paddock.presentation.api.dependencies import (
    AccountServiceDep,
    CurrentUser,
    DBSession,
)
from paddock.presentation.api.schemas import (
    ChangePasswordRequest,
    MessageResponse,
    PublicProfileResponse,
    UpdateProfileRequest,
    UserResponse,
)
from paddock_identity.domain.user import UserNotFoundError
from paddock_identity.exceptions import IdentityError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user data"},
        401: {"description": "Not authenticated"},
    },
)
async def get_me(
    user: CurrentUser,
    account_service: AccountServiceDep,
) -> UserResponse:
    profile = await account_service.get_profile(user.user_id)
    return UserResponse.from_profile(profile)


@router.put(
    "/me",
    summary="Update current user's profile",
    responses={
        200: {"description": "Updated user data"},
        400: {"description": "Blank name"},
        401: {"description": "Not authenticated"},
    },
)
async def update_me(
    request: UpdateProfileRequest,
    user: CurrentUser,
    account_service: AccountServiceDep,
    session: DBSession,
) -> UserResponse:
    """
    Update first name, last name, phone or business name.

    Other fields in the body (password, verification state) are ignored.
    """
    try:
        profile = await account_service.update_profile(
            user.user_id,
            request.to_update(),
        )
        await session.commit()
    except IdentityError:
        await session.rollback()
        raise

    return UserResponse.from_profile(profile)


@router.post(
    "/change-password",
    summary="Change password",
    responses={
        200: {"description": "Password changed"},
        400: {"description": "Missing fields or new password too weak"},
        401: {"description": "Current password incorrect or not authenticated"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    user: CurrentUser,
    account_service: AccountServiceDep,
    session: DBSession,
) -> MessageResponse:
    try:
        await account_service.change_password(
            user_id=user.user_id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
        await session.commit()
    except IdentityError:
        await session.rollback()
        raise

    return MessageResponse(message="Password changed successfully")


@router.get(
    "/{user_id}",
    summary="Get a user's public profile",
    responses={
        200: {"description": "Public profile"},
        404: {"description": "User not found"},
    },
)
async def get_public_profile(
    user_id: str,
    account_service: AccountServiceDep,
) -> PublicProfileResponse:
    """No authentication required; exposes no email, phone or account state."""
    try:
        parsed_id = UUID(user_id)
    except ValueError as e:
        raise UserNotFoundError(user_id) from e

    profile = await account_service.get_public_profile(parsed_id)
    return PublicProfileResponse.from_profile(profile)
