"""API request/response schemas."""

from devconnect.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from devconnect.presentation.api.schemas.common import (
    ErrorResponse,
    FieldError,
    ValidationErrorResponse,
)
from devconnect.presentation.api.schemas.users import (
    DevProfileSchema,
    PhotoSchema,
    UpdateProfileRequest,
    UserResponse,
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    # Common
    "ErrorResponse",
    "FieldError",
    "ValidationErrorResponse",
    # Users
    "DevProfileSchema",
    "PhotoSchema",
    "UpdateProfileRequest",
    "UserResponse",
]
