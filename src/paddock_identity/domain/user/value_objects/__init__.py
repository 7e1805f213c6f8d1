"""Value objects for the user domain."""

from paddock_identity.domain.user.value_objects.email import Email
from paddock_identity.domain.user.value_objects.profile_update import ProfileUpdate
from paddock_identity.domain.user.value_objects.user_type import UserType

__all__ = [
    "Email",
    "ProfileUpdate",
    "UserType",
]
