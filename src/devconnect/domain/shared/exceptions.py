"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions inherit from DomainException
so the presentation layer can translate them in one place.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Authentication Errors (401)
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHORIZED = "UNAUTHORIZED"

    # Not Found Errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Conflict Errors (409)
    EMAIL_ALREADY_REGISTERED = "EMAIL_ALREADY_REGISTERED"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str = "Invalid request body",
        field_errors: list[dict[str, str]] | None = None,
    ):
        super().__init__(
            message,
            code=ErrorCode.VALIDATION_ERROR,
            details={"field_errors": field_errors or []},
        )
        self.field_errors = field_errors or []


class EntityNotFoundError(DomainException):
    """Raised when a requested entity does not exist."""


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""


class AuthenticationError(DomainException):
    """Base class for failures that map to 401 responses."""


class InternalError(DomainException):
    """Raised for infrastructure failures.

    The message returned to clients is always generic; the cause is kept
    in ``details`` and the exception chain for server-side logs.
    """

    def __init__(
        self,
        message: str = "An internal error occurred",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.INTERNAL_ERROR, details=details)
