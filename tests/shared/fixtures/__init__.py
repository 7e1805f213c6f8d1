"""Shared pytest fixtures for all test packages."""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
)
from tests.shared.fixtures.factories import TestUserFactory
from tests.shared.fixtures.fakes import InMemoryCredentialStore, RecordingMailDispatcher

__all__ = [
    "async_engine",
    "db_session",
    "postgres_container",
    "InMemoryCredentialStore",
    "RecordingMailDispatcher",
    "TestUserFactory",
]
