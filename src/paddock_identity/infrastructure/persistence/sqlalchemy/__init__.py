"""SQLAlchemy implementation for paddock_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel: SQLAlchemy model for the users table
- CredentialStoreSQLAlchemy: CredentialStore implementation
- build_engine / create_tables / drop_tables: engine and schema helpers
"""

from paddock_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from paddock_identity.infrastructure.persistence.sqlalchemy.init_db import (
    build_engine,
    create_tables,
    drop_tables,
)
from paddock_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from paddock_identity.infrastructure.persistence.sqlalchemy.repositories import (
    CredentialStoreSQLAlchemy,
)

__all__ = [
    "CredentialStoreSQLAlchemy",
    "IdentityBase",
    "UserModel",
    "build_engine",
    "create_tables",
    "drop_tables",
]
