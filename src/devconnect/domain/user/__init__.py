"""User domain: identity, credentials and profile."""

from devconnect.domain.user.exceptions import (
    AuthenticationRequiredError,
    CredentialProcessingError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidProfileError,
    RepositoryUnavailableError,
    UserNotFoundError,
)
from devconnect.domain.user.value_objects import (
    DevProfile,
    Email,
    Gender,
    Photo,
    normalize_email,
)
from devconnect.domain.user.aggregates import PROFILE_FIELDS, User
from devconnect.domain.user.repositories import UserRepository

__all__ = [
    # Aggregates
    "PROFILE_FIELDS",
    "User",
    # Value objects
    "DevProfile",
    "Email",
    "Gender",
    "Photo",
    "normalize_email",
    # Repositories
    "UserRepository",
    # Exceptions
    "AuthenticationRequiredError",
    "CredentialProcessingError",
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "InvalidEmailError",
    "InvalidProfileError",
    "RepositoryUnavailableError",
    "UserNotFoundError",
]
