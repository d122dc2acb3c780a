"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional, Union
from uuid import UUID

from devconnect.domain.user.aggregates.user import User
from devconnect.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations own the uniqueness of the normalized email and must
    report a duplicate insert as ``EmailAlreadyExistsError``.
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Raises
        ------
        EmailAlreadyExistsError
            If a user with the same normalized email already exists
        """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID. The password hash is never loaded."""

    @abstractmethod
    async def find_by_email(
        self,
        email: Union[str, Email],
        include_credential_hash: bool = False,
    ) -> Optional[User]:
        """Find a user by normalized email.

        The password hash is only populated when
        ``include_credential_hash`` is set.
        """

    @abstractmethod
    async def update(self, user_id: UUID, fields: dict[str, Any]) -> User:
        """Apply a partial profile update and return the updated user.

        Raises
        ------
        UserNotFoundError
            If no user has ``user_id``
        """
