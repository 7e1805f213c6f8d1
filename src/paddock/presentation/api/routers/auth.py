"""Authentication router: registration, verification, login and password reset."""

import logging

from fastapi import APIRouter, status

from paddock.presentation.api.dependencies import AccountServiceDep, DBSession
from paddock.presentation.api.schemas import (
    AuthResponse,
    EmailRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
    UserResponse,
)
from paddock_identity.application.dtos import RegistrationData
from paddock_identity.exceptions import IdentityError

logger = logging.getLogger(__name__)

router = APIRouter()

FORGOT_PASSWORD_MESSAGE = (
    "If an account with that email exists, a password reset link has been sent."
)
RESEND_VERIFICATION_MESSAGE = (
    "If an unverified account with that email exists, "
    "a new verification link has been sent."
)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered, verification email sent"},
        400: {"description": "Missing fields, invalid email or weak password"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    account_service: AccountServiceDep,
    session: DBSession,
) -> UserResponse:
    """
    Register a buyer or seller account.

    The account stays unverified until the emailed link is opened.
    """
    try:
        profile = await account_service.register(
            RegistrationData(
                email=request.email,
                password=request.password,
                first_name=request.first_name,
                last_name=request.last_name,
                phone=request.phone,
                user_type=request.user_type,
                business_name=request.business_name,
            ),
        )
        await session.commit()
    except IdentityError:
        await session.rollback()
        raise

    return UserResponse.from_profile(profile)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        400: {"description": "Missing fields"},
        401: {"description": "Invalid credentials or email not verified"},
    },
)
async def login(
    request: LoginRequest,
    account_service: AccountServiceDep,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Returns a bearer session token. Unverified accounts get a 401 with
    code ``EMAIL_NOT_VERIFIED`` once the password is correct.
    """
    result = await account_service.login(
        email=request.email,
        password=request.password,
    )
    return AuthResponse.from_result(result)


@router.get(
    "/verify/{token}",
    summary="Verify email address",
    responses={
        200: {"description": "Email verified"},
        400: {"description": "Invalid or expired token"},
    },
)
async def verify_email(
    token: str,
    account_service: AccountServiceDep,
    session: DBSession,
) -> UserResponse:
    try:
        profile = await account_service.verify_email(token)
        await session.commit()
    except IdentityError:
        await session.rollback()
        raise

    return UserResponse.from_profile(profile)


@router.post(
    "/resend-verification",
    summary="Resend the verification email",
    responses={
        200: {"description": "Always returned, whether or not the email exists"},
    },
)
async def resend_verification(
    request: EmailRequest,
    account_service: AccountServiceDep,
    session: DBSession,
) -> MessageResponse:
    await account_service.resend_verification(request.email)
    await session.commit()

    return MessageResponse(message=RESEND_VERIFICATION_MESSAGE)


@router.post(
    "/forgot-password",
    summary="Request password reset",
    responses={
        200: {"description": "Always returned, whether or not the email exists"},
    },
)
async def forgot_password(
    request: EmailRequest,
    account_service: AccountServiceDep,
    session: DBSession,
) -> MessageResponse:
    """Request a password reset email."""
    await account_service.request_password_reset(request.email)
    await session.commit()

    return MessageResponse(message=FORGOT_PASSWORD_MESSAGE)


@router.post(
    "/reset-password",
    summary="Reset password with a token",
    responses={
        200: {"description": "Password reset"},
        400: {"description": "Missing fields, invalid or expired token, weak password"},
    },
)
async def reset_password(
    request: ResetPasswordRequest,
    account_service: AccountServiceDep,
    session: DBSession,
) -> MessageResponse:
    try:
        await account_service.reset_password(
            token=request.token,
            new_password=request.new_password,
        )
        await session.commit()
    except IdentityError:
        await session.rollback()
        raise

    return MessageResponse(message="Password has been reset successfully")
