"""Shared domain building blocks."""

from devconnect.domain.shared.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InternalError,
    ValidationError,
)
from devconnect.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "InternalError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
