"""Authentication service for registration, login and the request gate."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from devconnect.application.context import UserContext
from devconnect.domain.user import (
    AuthenticationRequiredError,
    CredentialProcessingError,
    Email,
    InvalidCredentialsError,
    InvalidEmailError,
    User,
)
from devconnect_auth import (
    InvalidTokenError,
    JWTService,
    PasswordHashingError,
    PasswordHashingService,
    TokenExpiredError,
    TokenSigningError,
)

if TYPE_CHECKING:
    from devconnect.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates devconnect_auth infrastructure (password hashing, session
    tokens) with the User domain to provide:
    - User registration
    - Login with password
    - Request authentication (the gate in front of protected routes)
    - Logout

    Every expected failure surfaces as a typed domain exception. Tokens are
    stateless: logging out does not revoke a token that is still within its
    lifetime.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    @property
    def token_ttl(self) -> timedelta:
        return self._jwt_service.ttl

    async def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str = "",
    ) -> User:
        normalized = Email(email)

        try:
            password_hash = await self._password_service.hash_async(password)
        except PasswordHashingError as e:
            logger.error("Password hashing failed during registration")
            raise CredentialProcessingError("hash") from e

        user = User.create(
            normalized,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        )
        # Uniqueness is enforced by the repository (EmailAlreadyExistsError)
        created = await self._user_repo.create(user)

        logger.info("User registered: %s", created.id)
        return created.without_credentials()

    async def login(
        self,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        try:
            normalized = Email(email)
        except InvalidEmailError:
            normalized = None

        user = None
        if normalized is not None:
            user = await self._user_repo.find_by_email(
                normalized,
                include_credential_hash=True,
            )

        if user is None or not user.password_hash:
            # Same work and same error as a wrong password
            await self._password_service.verify_dummy_async(password)
            logger.debug("Login failed: unknown account")
            raise InvalidCredentialsError

        if not await self._password_service.verify_async(password, user.password_hash):
            logger.debug("Login failed: wrong password for user %s", user.id)
            raise InvalidCredentialsError

        try:
            token = self._jwt_service.issue(user.id)
        except TokenSigningError as e:
            logger.error("Session token signing failed for user %s", user.id)
            raise CredentialProcessingError("sign") from e

        logger.info("User logged in: %s", user.id)
        return user.without_credentials(), token

    async def authenticate(self, token: str | None) -> UserContext:
        """Resolve the caller's identity from a session token.

        All failure causes collapse into ``AuthenticationRequiredError``;
        the reason is kept for server-side logs only.
        """
        if not token:
            raise AuthenticationRequiredError("missing token")

        try:
            payload = self._jwt_service.verify(token)
        except TokenExpiredError as e:
            logger.debug("Rejected expired session token")
            raise AuthenticationRequiredError("expired token") from e
        except InvalidTokenError as e:
            logger.warning("Rejected invalid session token: %s", e.message)
            raise AuthenticationRequiredError("invalid token") from e

        user = await self._user_repo.find_by_id(payload.subject)
        if user is None:
            logger.warning("Session token references unknown user %s", payload.subject)
            raise AuthenticationRequiredError("unknown subject")

        return UserContext.create(user)

    def logout(self, context: UserContext | None = None) -> None:
        """Stateless logout.

        Nothing is stored server-side. The transport layer discards the
        client's token; a copy kept elsewhere stays valid until it expires.
        """
        if context is not None:
            logger.info("User logged out: %s", context.user_id)
        else:
            logger.debug("Anonymous logout")
