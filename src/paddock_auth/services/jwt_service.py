"""JWT token service.

Provides signed session token creation and verification.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from paddock_auth.exceptions import ExpiredTokenError, InvalidTokenError
from paddock_auth.schemas import TokenPayload

ACCESS_TOKEN_TYPE = "access"


class JWTService:
    """Service for session token creation and verification.

    Session tokens are HS256-signed JWTs carrying the user's id, email
    and user type. Verification fails closed: tampering, a foreign secret
    or a past expiry all raise.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(user_id, "user@example.com", "buyer")
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until a session token expires (default 24)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_expire

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        user_type: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a session token.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        user_type
            The user's role, used for authorization decisions
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload = {
            "sub": str(user_id),
            "email": email,
            "user_type": user_type,
            "type": ACCESS_TOKEN_TYPE,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a session token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        ExpiredTokenError
            If the signature is valid but the token is past its expiry
        InvalidTokenError
            If the token is tampered, signed with another secret or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp"]},
            )

            token_type = payload.get("type", ACCESS_TOKEN_TYPE)
            if token_type != ACCESS_TOKEN_TYPE:
                msg = f"Unexpected token type: {token_type}"
                raise InvalidTokenError(msg)

            return TokenPayload(
                user_id=UUID(payload["sub"]),
                email=payload["email"],
                user_type=payload["user_type"],
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                token_type=token_type,
            )

        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
