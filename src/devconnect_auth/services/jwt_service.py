"""JWT session token service.

Provides creation and verification of stateless, signed session tokens.
There is no server-side session table, so a token stays valid until its
expiry even after the client logs out.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from devconnect_auth.exceptions import (
    InvalidTokenError,
    TokenExpiredError,
    TokenSigningError,
)
from devconnect_auth.schemas import TokenPayload


class JWTService:
    """Service for session token creation and verification.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.issue(user_id)
    >>> payload = service.verify(token)
    >>> print(payload.subject)
    """

    DEFAULT_EXPIRE_MINUTES = 2
    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("sub", "iat", "exp")

    def __init__(
        self,
        secret_key: str,
        access_token_expire_minutes: int = DEFAULT_EXPIRE_MINUTES,
        algorithm: str = ALGORITHM,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_minutes
            Minutes until an issued token expires
        algorithm
            HMAC algorithm used for signing (default HS256)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        if access_token_expire_minutes <= 0:
            msg = "Token lifetime must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = timedelta(minutes=access_token_expire_minutes)

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(
        self,
        subject: UUID,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed session token for ``subject``.

        Parameters
        ----------
        subject
            The user's unique identifier
        expires_delta
            Custom lifetime (optional, defaults to the configured TTL)

        Returns
        -------
        The encoded JWT token string

        Raises
        ------
        TokenSigningError
            If the configured key or algorithm cannot sign
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(subject),
            "iat": now,
            "exp": now + (expires_delta or self._ttl),
        }
        try:
            return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
            raise TokenSigningError from e

    def verify(self, token: str) -> TokenPayload:
        """Verify and decode a session token.

        The signature is checked before any claim is read, so a forged
        ``exp`` or ``sub`` never gets inspected.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        TokenExpiredError
            If the signature is valid but the token is past its expiry
        InvalidTokenError
            If the token is malformed or its signature does not match
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": list(self.REQUIRED_CLAIMS)},
            )
            return TokenPayload(
                subject=UUID(payload["sub"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
