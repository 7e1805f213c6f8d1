"""
Fixtures for HTTP API tests.

Each test gets its own application on a throwaway SQLite file. Outgoing
mail is captured by a RecordingMailDispatcher instead of SMTP.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from paddock.presentation.api.app import API_V1_PREFIX, create_app
from paddock.presentation.api.dependencies import (
    get_mail_dispatcher,
    get_password_service,
)
from paddock_auth import PasswordHashingService
from paddock_config import Settings
from tests.shared.fixtures.fakes import RecordingMailDispatcher

TEST_PASSWORD = "Password123"


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return Settings(
        jwt_secret_key=SecretStr("api-test-secret"),
        database_dsn=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        frontend_base_url="https://paddock.example",
        _env_file=None,
    )


@pytest.fixture
def mail() -> RecordingMailDispatcher:
    return RecordingMailDispatcher()


@pytest.fixture
def app(api_settings, mail):
    app = create_app(api_settings)
    app.dependency_overrides[get_mail_dispatcher] = lambda: mail
    app.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        rounds=4,
    )
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


class ApiHelper:
    """Shortcuts for the steps most tests need before the one they check."""

    __test__ = False

    def __init__(self, client: TestClient, mail: RecordingMailDispatcher):
        self.client = client
        self.mail = mail

    def register(self, email: str = "alice@example.com", **overrides):
        body = {
            "email": email,
            "password": TEST_PASSWORD,
            "firstName": "Alice",
            "lastName": "Rider",
        }
        body.update(overrides)
        return self.client.post(f"{API_V1_PREFIX}/auth/register", json=body)

    def verify_last(self):
        token = self.mail.last_verification_token()
        return self.client.get(f"{API_V1_PREFIX}/auth/verify/{token}")

    def login(self, email: str = "alice@example.com", password: str = TEST_PASSWORD):
        return self.client.post(
            f"{API_V1_PREFIX}/auth/login",
            json={"email": email, "password": password},
        )

    def verified_user(self, email: str = "alice@example.com", **overrides) -> dict:
        """Register, verify and log in; returns the login response body."""
        assert self.register(email, **overrides).status_code == 201
        assert self.verify_last().status_code == 200
        response = self.login(email)
        assert response.status_code == 200
        return response.json()

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def api(client, mail) -> ApiHelper:
    return ApiHelper(client, mail)
