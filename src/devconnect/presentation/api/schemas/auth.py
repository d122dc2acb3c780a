"""Authentication schemas for request/response models."""

from pydantic import ConfigDict, EmailStr, Field, field_validator

from devconnect.domain.user import normalize_email
from devconnect.presentation.api.schemas.common import CamelModel, StrictRequest
from devconnect.presentation.api.schemas.users import UserResponse


class RegisterRequest(StrictRequest):
    """Request schema for user registration."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=64,
        description="Password (8-64 characters)",
    )
    first_name: str = Field(..., min_length=5, max_length=50)
    last_name: str = Field(..., max_length=50)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "dev@example.com",
                "password": "longenough1",
                "firstName": "Alice",
                "lastName": "Smith",
            },
        },
    )

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, v: object) -> object:
        return normalize_email(v) if isinstance(v, str) else v

    @field_validator("first_name", "last_name")
    @classmethod
    def _trim_names(cls, v: str) -> str:
        return v.strip()


class LoginRequest(StrictRequest):
    """Request schema for user login."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=64)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "dev@example.com",
                "password": "longenough1",
            },
        },
    )

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, v: object) -> object:
        return normalize_email(v) if isinstance(v, str) else v


class RegisterResponse(CamelModel):
    """Response schema for a successful registration."""

    message: str = "User created successfully"
    user: UserResponse


class LoginResponse(CamelModel):
    """Response schema for a successful login.

    The session token itself travels in the HttpOnly ``access_token``
    cookie, not in the body.
    """

    message: str = "Login successful"
    user: UserResponse
    expires_in: int = Field(..., description="Session lifetime in seconds")
