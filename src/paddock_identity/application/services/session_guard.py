"""Session guard: resolves bearer tokens to users and checks roles."""

import logging
from collections.abc import Iterable

from paddock_auth import ExpiredTokenError, InvalidTokenError, JWTService
from paddock_identity.application.context import UserContext
from paddock_identity.domain.user import CredentialStore, UserType
from paddock_identity.exceptions import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)


class SessionGuard:
    """Authenticate session tokens and authorize by user type.

    Every failure of ``authenticate`` surfaces as ``UnauthorizedError``;
    the concrete cause is kept in its ``reason`` for logging only.
    """

    def __init__(self, jwt_service: JWTService, credential_store: CredentialStore):
        self._jwt_service = jwt_service
        self._store = credential_store

    async def authenticate(self, token: str | None) -> UserContext:
        if not token:
            raise UnauthorizedError(reason="missing_token")

        try:
            payload = self._jwt_service.verify_token(token)
        except ExpiredTokenError as e:
            logger.warning("Rejected session token: %s", e.reason)
            raise UnauthorizedError("Token has expired", reason=e.reason) from e
        except InvalidTokenError as e:
            logger.warning("Rejected session token: %s (%s)", e.reason, e.message)
            raise UnauthorizedError("Invalid token", reason=e.reason) from e

        user = await self._store.find_by_id(payload.user_id)
        if user is None:
            logger.warning("Session token for unknown user %s", payload.user_id)
            raise UnauthorizedError(reason="unknown_user")

        if not user.is_verified:
            logger.warning("Session token for unverified user %s", user.id)
            raise UnauthorizedError(reason="unverified_user")

        return UserContext.create(user)

    def authorize(
        self,
        context: UserContext,
        allowed_roles: Iterable[UserType] = (),
    ) -> UserContext:
        """Pass through when ``allowed_roles`` is empty or contains the caller."""
        roles = frozenset(allowed_roles)
        if roles and context.user_type not in roles:
            logger.warning(
                "Forbidden: user %s (%s) needs one of %s",
                context.user_id,
                context.user_type.value,
                sorted(role.value for role in roles),
            )
            raise ForbiddenError
        return context
