"""User domain exceptions.

Custom exceptions for the user domain, used for validation,
authentication failures and business rule violations.
"""

from devconnect.domain.shared.exceptions import (
    AuthenticationError,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    InternalError,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, field_errors=[{"path": "email", "message": message}])


class InvalidProfileError(ValidationError):
    """Raised when a profile field violates a domain rule."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message, field_errors=[{"path": field, "message": message}])


class EmailAlreadyExistsError(ConflictError):
    """Email already registered.

    The conflicting address is deliberately left out of the message.
    """

    def __init__(self) -> None:
        super().__init__(
            "Email address is already registered",
            code=ErrorCode.EMAIL_ALREADY_REGISTERED,
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class InvalidCredentialsError(AuthenticationError):
    """Login failed: unknown email or wrong password.

    Both causes share this single exception and message.
    """

    def __init__(self) -> None:
        super().__init__(
            "Invalid email or password",
            code=ErrorCode.INVALID_CREDENTIALS,
        )


class AuthenticationRequiredError(AuthenticationError):
    """No usable session: missing, invalid or expired token, or unknown user."""

    def __init__(self, reason: str = "missing token") -> None:
        super().__init__(
            "Authentication required",
            code=ErrorCode.UNAUTHORIZED,
            details={"reason": reason},
        )


class RepositoryUnavailableError(InternalError):
    """The user store failed to complete an operation."""

    def __init__(self, operation: str) -> None:
        super().__init__(details={"operation": operation})


class CredentialProcessingError(InternalError):
    """Hashing or token signing failed."""

    def __init__(self, operation: str) -> None:
        super().__init__(details={"operation": operation})
