"""User aggregates."""

from paddock_identity.domain.user.aggregates.user import User

__all__ = ["User"]
