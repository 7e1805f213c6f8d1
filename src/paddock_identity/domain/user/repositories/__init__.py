"""User repository interfaces."""

from paddock_identity.domain.user.repositories.credential_store import (
    UNSET,
    CredentialStore,
    UserChanges,
)

__all__ = ["UNSET", "CredentialStore", "UserChanges"]
