"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exchanged with clients in camelCase.

    Python code uses snake_case attribute names; JSON uses camelCase.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StrictRequest(CamelModel):
    """Base for request bodies. Unknown fields are rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")


class FieldError(BaseModel):
    """A single field-level validation failure."""

    path: str
    message: str


class ValidationErrorResponse(ErrorResponse):
    """Error response for rejected request bodies."""

    field_errors: list[FieldError] = Field(
        default_factory=list,
        serialization_alias="fieldErrors",
    )
