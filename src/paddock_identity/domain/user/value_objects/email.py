"""Email value object.

Provides validated email addresses for user identification. The value is
stored exactly as given (after trimming whitespace); lookups are
case-sensitive.
"""

import re
from dataclasses import dataclass

from paddock_identity.domain.user.exceptions import InvalidEmailError

# Validates: user@domain.tld (minimum requirements)
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
MAX_EMAIL_LENGTH = 255


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        trimmed = self.value.strip()

        if len(trimmed) > MAX_EMAIL_LENGTH or not EMAIL_PATTERN.match(trimmed):
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg)

        # Frozen dataclass: replace value with the trimmed version
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
