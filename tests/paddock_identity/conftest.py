"""
Pytest configuration for paddock_identity tests.

Provides the in-memory collaborators most unit tests build on.
"""

import pytest

from paddock_auth import JWTService, OpaqueTokenService, PasswordHashingService
from tests.shared.fixtures.fakes import InMemoryCredentialStore, RecordingMailDispatcher

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # noqa: S105


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)  # Low rounds for fast tests


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_JWT_SECRET)


@pytest.fixture
def token_service() -> OpaqueTokenService:
    return OpaqueTokenService()


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def mail_dispatcher() -> RecordingMailDispatcher:
    return RecordingMailDispatcher()
