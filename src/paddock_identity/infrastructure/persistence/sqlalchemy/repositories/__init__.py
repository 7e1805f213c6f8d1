"""SQLAlchemy repository implementations for identity."""

from paddock_identity.infrastructure.persistence.sqlalchemy.repositories.credential_store_sqlalchemy import (  # noqa: E501
    CredentialStoreSQLAlchemy,
)

__all__ = ["CredentialStoreSQLAlchemy"]
