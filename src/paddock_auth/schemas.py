"""Auth schemas and data structures.

These are simple data classes used for transferring authentication
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded session token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    email
        The user's email address at the time the token was issued
    user_type
        The user's role (buyer, seller or admin)
    exp
        Token expiration timestamp
    token_type
        Always "access" for session tokens
    """

    user_id: UUID
    email: str
    user_type: str
    exp: datetime
    token_type: str = "access"
