"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from devconnect.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """Immutable context for the current authenticated user.

    Produced by the authentication gate and threaded explicitly into
    downstream handlers. The wrapped user never carries a password hash.
    """

    user: User

    @property
    def user_id(self) -> UUID:
        return self.user.id

    @property
    def email(self) -> str:
        return self.user.email

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(user=user.without_credentials())

    def __str__(self) -> str:
        return f"UserContext({self.email})"

    def __repr__(self) -> str:
        return f"UserContext(user_id={self.user_id}, email={self.email!r})"
