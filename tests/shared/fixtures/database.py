"""
Testcontainers-based PostgreSQL fixtures for integration tests.

Provides isolated, ephemeral Postgres instances for each test session.

Usage:
    from tests.shared.fixtures.database import db_session

    async def test_something(db_session):
        store = CredentialStoreSQLAlchemy(db_session)
        await store.create(user)
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

from paddock_identity.infrastructure.persistence.sqlalchemy import IdentityBase

# Use same Postgres version as production
POSTGRES_IMAGE = "postgres:16-alpine"


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is shared across all tests in the session for performance.
    Each test gets a clean database state via table drop/create.
    """
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def async_engine(postgres_container):
    """
    Create an async SQLAlchemy engine connected to the test container.

    Session-scoped to avoid recreating the engine for each test.
    """
    connection_url = postgres_container.get_connection_url()
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    async_url = connection_url.replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    )
    async_url = async_url.replace("postgresql://", "postgresql+asyncpg://")

    return create_async_engine(
        async_url,
        echo=False,
        poolclass=NullPool,  # Avoid connection pool issues in tests
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(async_engine):
    """
    Provide an isolated database session for each test.

    Drops and recreates all tables, yields a session, then rolls back
    anything uncommitted.
    """
    async with async_engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.drop_all)
        await conn.run_sync(IdentityBase.metadata.create_all)

    session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_maker() as session:
        yield session
        await session.rollback()
