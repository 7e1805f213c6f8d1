"""FastAPI dependency injection for the Paddock API.

Provides dependencies for:
- Settings and database sessions (held on ``app.state``)
- Auth services configured from settings
- Authentication (current user from the bearer token)
- Role checks
"""

import logging
from datetime import timedelta
from typing import Annotated, AsyncGenerator, Awaitable, Callable

from fastapi import BackgroundTasks, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from paddock.presentation.api.background_mail import BackgroundMailDispatcher
from paddock_auth import JWTService, OpaqueTokenService, PasswordHashingService
from paddock_config.settings import Settings
from paddock_identity.application.context import UserContext
from paddock_identity.application.ports import MailDispatcher
from paddock_identity.application.services import AccountService, SessionGuard
from paddock_identity.domain.user import UserType
from paddock_identity.infrastructure.email import EmailService
from paddock_identity.infrastructure.persistence.sqlalchemy import (
    CredentialStoreSQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for bearer session tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Settings & Database Session
# -----------------------------------------------------------------------------


def get_app_settings(request: Request) -> Settings:
    """Settings built once by the application factory."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the session maker the
    lifespan put on ``app.state``.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_token_service() -> OpaqueTokenService:
    return OpaqueTokenService()


def get_mail_dispatcher(settings: SettingsDep) -> MailDispatcher:
    return EmailService(settings)


async def get_account_service(  # noqa: PLR0913
    session: DBSession,
    settings: SettingsDep,
    background_tasks: BackgroundTasks,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
    token_service: OpaqueTokenService = Depends(get_token_service),
    mail_dispatcher: MailDispatcher = Depends(get_mail_dispatcher),
) -> AccountService:
    """
    Get account service with all dependencies.

    This service orchestrates registration, verification, login and
    password management. Its emails go out once the response is sent.
    """
    return AccountService(
        credential_store=CredentialStoreSQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
        token_service=token_service,
        mail_dispatcher=BackgroundMailDispatcher(mail_dispatcher, background_tasks),
        frontend_base_url=settings.frontend_base_url,
        reset_token_ttl=timedelta(minutes=settings.reset_token_expire_minutes),
    )


# Type alias for injected account service
AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]


async def get_session_guard(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
) -> SessionGuard:
    return SessionGuard(
        jwt_service=jwt_service,
        credential_store=CredentialStoreSQLAlchemy(session),
    )


SessionGuardDep = Annotated[SessionGuard, Depends(get_session_guard)]


# -----------------------------------------------------------------------------
# Current User (bearer session token)
# -----------------------------------------------------------------------------


async def get_current_user(
    guard: SessionGuardDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> UserContext:
    """
    FastAPI dependency resolving the caller from the Authorization header.

    Raises
    ------
    UnauthorizedError
        If the token is missing, invalid or expired, or the user is gone
        or unverified
    """
    token = credentials.credentials if credentials is not None else None
    return await guard.authenticate(token)


# Type alias for injected current user
CurrentUser = Annotated[UserContext, Depends(get_current_user)]


def require_roles(
    *roles: UserType,
) -> Callable[[UserContext, SessionGuard], Awaitable[UserContext]]:
    """Dependency factory: authenticated caller whose user type is in ``roles``.

    With no roles any authenticated user passes.

    Examples
    --------
    >>> @router.get("/admin/stats")
    ... async def stats(user: Annotated[UserContext, Depends(require_roles(UserType.ADMIN))]):
    ...     ...
    """

    async def _require(user: CurrentUser, guard: SessionGuardDep) -> UserContext:
        return guard.authorize(user, roles)

    return _require


# Type alias for sellers and admins
SellerUser = Annotated[
    UserContext,
    Depends(require_roles(UserType.SELLER, UserType.ADMIN)),
]

# Type alias for admin user
AdminUser = Annotated[UserContext, Depends(require_roles(UserType.ADMIN))]
