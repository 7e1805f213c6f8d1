"""Profile update value object.

Holds only the four fields a user may change about themselves. Anything
else (password, verification state, tokens) has no slot here and so can
never travel through the profile update path.
"""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class ProfileUpdate:
    """Requested profile changes; ``None`` leaves a field untouched."""

    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    business_name: str | None = None

    def changed_fields(self) -> dict[str, str]:
        return {
            field.name: value
            for field in fields(self)
            if (value := getattr(self, field.name)) is not None
        }
