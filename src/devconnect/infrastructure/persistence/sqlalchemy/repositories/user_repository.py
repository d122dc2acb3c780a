"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Any, Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import undefer

from devconnect.domain.shared.time import ensure_tz_aware
from devconnect.domain.user import (
    DevProfile,
    Email,
    EmailAlreadyExistsError,
    Photo,
    RepositoryUnavailableError,
    User,
    UserNotFoundError,
    UserRepository,
)
from devconnect.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Driver and ORM errors are translated into domain exceptions so nothing
    SQLAlchemy-specific reaches the application layer.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, user: User) -> User:
        model = self._map_to_model(user)
        try:
            self._session.add(model)
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError from e
            logger.exception("Integrity error while creating user %s", user.id)
            raise RepositoryUnavailableError("create") from e
        except SQLAlchemyError as e:
            logger.exception("Database error while creating user %s", user.id)
            raise RepositoryUnavailableError("create") from e

        logger.info("Created user: %s", user.id)
        return user

    async def find_by_id(self, user_id: UUID) -> User | None:
        try:
            model = await self._find_model_by_id(user_id)
        except SQLAlchemyError as e:
            logger.exception("Database error while loading user %s", user_id)
            raise RepositoryUnavailableError("find_by_id") from e

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(
        self,
        email: Union[str, Email],
        include_credential_hash: bool = False,
    ) -> User | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(func.lower(UserModel.email) == email_value)
        if include_credential_hash:
            stmt = stmt.options(undefer(UserModel.password_hash)).execution_options(
                populate_existing=True,
            )

        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.exception("Database error while looking up user by email")
            raise RepositoryUnavailableError("find_by_email") from e

        if model is None:
            return None

        return self._map_to_domain(model, include_credential_hash)

    async def update(self, user_id: UUID, fields: dict[str, Any]) -> User:
        try:
            model = await self._find_model_by_id(user_id)
        except SQLAlchemyError as e:
            logger.exception("Database error while loading user %s", user_id)
            raise RepositoryUnavailableError("update") from e

        if model is None:
            raise UserNotFoundError(str(user_id))

        user = self._map_to_domain(model)
        user.update_profile(**fields)
        self._update_model(model, user)

        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.exception("Database error while updating user %s", user_id)
            raise RepositoryUnavailableError("update") from e

        logger.debug("Updated user: %s", user_id)
        return user

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(
        self,
        model: UserModel,
        include_credential_hash: bool = False,
    ) -> User:
        # Touching an unloaded deferred column would trigger a lazy load
        password_hash = model.password_hash if include_credential_hash else None
        return User.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=password_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            birth_date=model.birth_date,
            gender=model.gender,
            bio=model.bio,
            photos=[Photo.from_dict(p) for p in model.photos or []],
            dev=DevProfile.from_dict(model.dev) if model.dev else None,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            first_name=user.first_name,
            last_name=user.last_name,
            birth_date=user.birth_date,
            gender=user.gender.value if user.gender else None,
            bio=user.bio,
            photos=[p.to_dict() for p in user.photos],
            dev=user.dev.to_dict() if user.dev else None,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.birth_date = user.birth_date
        model.gender = user.gender.value if user.gender else None
        model.bio = user.bio
        model.photos = [p.to_dict() for p in user.photos]
        model.dev = user.dev.to_dict() if user.dev else None
        model.updated_at = user.updated_at
