"""Integration fixtures: a real PostgreSQL via testcontainers."""

from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    db_session,
    postgres_container,
)
