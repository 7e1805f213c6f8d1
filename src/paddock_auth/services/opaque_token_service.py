"""Opaque one-time token generation.

Opaque tokens carry no structure and no expiry of their own. They are
validated by exact lookup in storage (email verification, password reset).
"""

import secrets


class OpaqueTokenService:
    """Generates cryptographically random, hex-encoded tokens."""

    TOKEN_BYTES = 32

    def __init__(self, token_bytes: int = TOKEN_BYTES):
        if token_bytes < 16:  # noqa: PLR2004
            msg = "Opaque tokens need at least 16 random bytes"
            raise ValueError(msg)
        self._token_bytes = token_bytes

    def generate(self) -> str:
        """Return a fresh token of ``2 * token_bytes`` hex characters."""
        return secrets.token_hex(self._token_bytes)
