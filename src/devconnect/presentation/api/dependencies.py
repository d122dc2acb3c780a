"""FastAPI dependency injection for the DevConnect API.

Provides dependencies for:
- Database sessions
- Authentication services
- The authentication gate (current user from the session token)
- Profile services
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Cookie, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from devconnect.application.context import UserContext
from devconnect.application.services import AuthenticationService, ProfileService
from devconnect.domain.user import (
    AuthenticationRequiredError,
    RepositoryUnavailableError,
)
from devconnect.infrastructure.persistence.sqlalchemy import (
    Base,
    UserRepositorySQLAlchemy,
)
from devconnect.presentation.api.config import get_api_settings
from devconnect_auth import JWTService, PasswordHashingService
from devconnect_config.settings import Settings

logger = logging.getLogger(__name__)

# Cookie carrying the session token
ACCESS_TOKEN_COOKIE = "access_token"  # NOQA: S105

# Bearer header is accepted as a fallback for non-browser clients
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton per URL)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=4)
def get_engine(database_url: str) -> AsyncEngine:
    """
    Get the shared async database engine for ``database_url``.

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=4)
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker for ``database_url``.

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(settings: SettingsDep) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    Uncommitted work is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker(settings.database_url)() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def commit_session(session: AsyncSession) -> None:
    """Commit the request's unit of work, mapping driver errors."""
    try:
        await session.commit()
    except SQLAlchemyError as e:
        logger.exception("Commit failed")
        await session.rollback()
        raise RepositoryUnavailableError("commit") from e


# -----------------------------------------------------------------------------
# Database Schema Management
# -----------------------------------------------------------------------------


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date")


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
        algorithm=settings.jwt_algorithm,
    )


@lru_cache(maxsize=4)
def _password_service_for(rounds: int) -> PasswordHashingService:
    # Shared so the dummy hash used for unknown-account logins is built once
    return PasswordHashingService(rounds=rounds)


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return _password_service_for(settings.bcrypt_rounds)


async def get_authentication_service(
    session: DBSession,
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
    password_service: Annotated[PasswordHashingService, Depends(get_password_service)],
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates registration, login and request authentication.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_profile_service(session: DBSession) -> ProfileService:
    """Get profile service bound to the request's session."""
    return ProfileService(user_repository=UserRepositorySQLAlchemy(session))


ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]


# -----------------------------------------------------------------------------
# Authentication Gate
# -----------------------------------------------------------------------------


def get_session_tokens(
    access_token: Annotated[str | None, Cookie(alias=ACCESS_TOKEN_COOKIE)] = None,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> list[str]:
    """Collect candidate session tokens: cookie first, then Bearer header."""
    tokens = []
    if access_token:
        tokens.append(access_token)
    if credentials is not None and credentials.credentials not in tokens:
        tokens.append(credentials.credentials)
    return tokens


SessionTokens = Annotated[list[str], Depends(get_session_tokens)]


async def get_current_user_context(
    tokens: SessionTokens,
    auth_service: AuthService,
) -> UserContext:
    """
    FastAPI dependency guarding protected routes.

    Verifies the session token and resolves the user it refers to. A
    cookie that fails verification does not shadow a valid Bearer header.

    Raises
    ------
    AuthenticationRequiredError
        If no candidate token is valid and refers to a known user
    """
    if not tokens:
        return await auth_service.authenticate(None)

    for token in tokens[:-1]:
        try:
            return await auth_service.authenticate(token)
        except AuthenticationRequiredError as e:
            logger.debug(
                "Session cookie rejected (%s), trying Bearer header",
                e.details.get("reason"),
            )

    return await auth_service.authenticate(tokens[-1])


# Type alias for injected user context
CurrentUserContext = Annotated[UserContext, Depends(get_current_user_context)]


async def get_current_user_context_optional(
    tokens: SessionTokens,
    auth_service: AuthService,
) -> UserContext | None:
    """
    Optional authentication dependency.

    Returns the user context if a valid token is provided, None otherwise.
    """
    if not tokens:
        return None

    try:
        return await get_current_user_context(tokens, auth_service)
    except AuthenticationRequiredError:
        return None


# Type alias for optional user context
OptionalUserContext = Annotated[
    UserContext | None,
    Depends(get_current_user_context_optional),
]
