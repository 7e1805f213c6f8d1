"""Data transfer objects for the identity application layer."""

from paddock_identity.application.dtos.account_dtos import (
    LoginResult,
    RegistrationData,
)

__all__ = ["LoginResult", "RegistrationData"]
