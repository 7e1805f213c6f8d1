"""Unit tests for SessionGuard."""

from datetime import timedelta
from uuid import uuid4

import pytest

from paddock_auth import JWTService
from paddock_identity import (
    ErrorCode,
    ForbiddenError,
    SessionGuard,
    UnauthorizedError,
    UserContext,
    UserType,
)
from tests.shared.fixtures.factories import TestUserFactory
from tests.shared.fixtures.fakes import InMemoryCredentialStore


@pytest.fixture
def verified_user():
    return TestUserFactory.alice()


@pytest.fixture
def guard(jwt_service, verified_user) -> SessionGuard:
    return SessionGuard(jwt_service, InMemoryCredentialStore([verified_user]))


def _token_for(jwt_service, user, **kwargs) -> str:
    return jwt_service.create_access_token(
        user_id=user.id,
        email=user.email,
        user_type=user.user_type.value,
        **kwargs,
    )


class TestAuthenticate:
    async def test_valid_token(self, guard, jwt_service, verified_user):
        context = await guard.authenticate(_token_for(jwt_service, verified_user))

        assert context == UserContext(
            user_id=verified_user.id,
            email=verified_user.email,
            user_type=UserType.BUYER,
        )

    @pytest.mark.parametrize("token", [None, ""])
    async def test_missing_token(self, guard, token):
        with pytest.raises(UnauthorizedError) as exc_info:
            await guard.authenticate(token)

        assert exc_info.value.reason == "missing_token"
        assert exc_info.value.code == ErrorCode.UNAUTHORIZED

    async def test_garbage_token(self, guard):
        with pytest.raises(UnauthorizedError) as exc_info:
            await guard.authenticate("not.a.jwt")

        assert exc_info.value.reason == "invalid_token"

    async def test_foreign_secret(self, guard, verified_user):
        foreign = JWTService(secret_key="some-other-secret")

        with pytest.raises(UnauthorizedError) as exc_info:
            await guard.authenticate(_token_for(foreign, verified_user))

        assert exc_info.value.reason == "invalid_token"

    async def test_tampered_token(self, guard, jwt_service, verified_user):
        token = _token_for(jwt_service, verified_user)
        header, payload, signature = token.split(".")
        flipped = "A" if signature[0] != "A" else "B"

        with pytest.raises(UnauthorizedError):
            await guard.authenticate(f"{header}.{payload}.{flipped}{signature[1:]}")

    async def test_expired_token(self, guard, jwt_service, verified_user):
        token = _token_for(
            jwt_service,
            verified_user,
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(UnauthorizedError) as exc_info:
            await guard.authenticate(token)

        assert exc_info.value.reason == "expired_token"
        assert exc_info.value.message == "Token has expired"

    async def test_unknown_user(self, guard, jwt_service):
        token = jwt_service.create_access_token(
            user_id=uuid4(),
            email="ghost@example.com",
            user_type="buyer",
        )

        with pytest.raises(UnauthorizedError) as exc_info:
            await guard.authenticate(token)

        assert exc_info.value.reason == "unknown_user"
        assert exc_info.value.message == "Authentication required"

    async def test_unverified_user(self, jwt_service):
        pending = TestUserFactory.alice(is_verified=False)
        guard = SessionGuard(jwt_service, InMemoryCredentialStore([pending]))

        with pytest.raises(UnauthorizedError) as exc_info:
            await guard.authenticate(_token_for(jwt_service, pending))

        assert exc_info.value.reason == "unverified_user"
        assert exc_info.value.message == "Authentication required"

    async def test_user_type_comes_from_store(self, jwt_service):
        """A role claim in the token is not trusted over the stored role."""
        seller = TestUserFactory.bob_seller()
        guard = SessionGuard(jwt_service, InMemoryCredentialStore([seller]))
        token = jwt_service.create_access_token(
            user_id=seller.id,
            email=seller.email,
            user_type="admin",
        )

        context = await guard.authenticate(token)

        assert context.user_type == UserType.SELLER


class TestAuthorize:
    def _context(self, user_type: UserType) -> UserContext:
        return UserContext(user_id=uuid4(), email="x@example.com", user_type=user_type)

    def test_no_roles_means_any_authenticated_user(self, guard):
        context = self._context(UserType.BUYER)
        assert guard.authorize(context) is context

    def test_allowed_role(self, guard):
        context = self._context(UserType.SELLER)
        allowed = [UserType.SELLER, UserType.ADMIN]
        assert guard.authorize(context, allowed) is context

    def test_disallowed_role(self, guard):
        with pytest.raises(ForbiddenError) as exc_info:
            guard.authorize(self._context(UserType.BUYER), [UserType.ADMIN])

        assert exc_info.value.code == ErrorCode.FORBIDDEN
