"""Profile service for reading and updating the caller's own profile."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from devconnect.domain.user import User

if TYPE_CHECKING:
    from devconnect.application.context import UserContext
    from devconnect.domain.user import UserRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """Reads and updates the profile of the authenticated user.

    Only non-credential fields can change here; email and password are
    fixed after registration.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    def get_profile(self, context: UserContext) -> User:
        return context.user

    async def update_profile(
        self,
        context: UserContext,
        changes: dict[str, Any],
    ) -> User:
        if not changes:
            return context.user

        updated = await self._user_repo.update(context.user_id, changes)

        logger.info(
            "Profile updated for user %s (fields: %s)",
            context.user_id,
            ", ".join(sorted(changes)),
        )
        return updated.without_credentials()
