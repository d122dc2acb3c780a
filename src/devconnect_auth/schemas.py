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

    This represents the claims extracted from a verified token.

    Attributes
    ----------
    subject
        The id of the user the token authenticates
    issued_at
        When the token was issued
    expires_at
        When the token stops being valid
    """

    subject: UUID
    issued_at: datetime
    expires_at: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) > self.expires_at
