"""User profile schemas for request/response models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Literal, Optional
from uuid import UUID

from pydantic import ConfigDict, Field, HttpUrl, field_validator

from devconnect.domain.user import DevProfile, Photo, User
from devconnect.presentation.api.schemas.common import CamelModel, StrictRequest

GenderLiteral = Literal["male", "female", "others"]


class PhotoSchema(StrictRequest):
    """A profile photo."""

    url: HttpUrl
    is_primary: bool = False

    def to_domain(self) -> Photo:
        return Photo(url=str(self.url), is_primary=self.is_primary)


class DevProfileSchema(StrictRequest):
    """Developer profile details."""

    role: Optional[str] = Field(default=None, max_length=100)
    years_of_experience: Optional[int] = Field(default=None, ge=0, le=50)
    skills: list[str] = Field(default_factory=list, max_length=50)
    linked_in: Optional[HttpUrl] = None
    github: Optional[HttpUrl] = None

    def to_domain(self) -> DevProfile:
        return DevProfile(
            role=self.role,
            years_of_experience=self.years_of_experience,
            skills=tuple(self.skills),
            linkedin=str(self.linked_in) if self.linked_in else None,
            github=str(self.github) if self.github else None,
        )


class UpdateProfileRequest(StrictRequest):
    """Request schema for a partial profile update.

    Only the fields present in the body are changed. Email and password
    are not accepted here.
    """

    first_name: Optional[str] = Field(default=None, min_length=5, max_length=50)
    last_name: Optional[str] = Field(default=None, max_length=50)
    birth_date: Optional[date] = None
    gender: Optional[GenderLiteral] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    photos: Optional[list[PhotoSchema]] = Field(default=None, max_length=20)
    dev: Optional[DevProfileSchema] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "bio": "Backend developer who likes async Python",
                "photos": [
                    {"url": "https://example.com/me.png", "isPrimary": True},
                ],
                "dev": {
                    "role": "Backend Engineer",
                    "yearsOfExperience": 4,
                    "skills": ["python", "postgres"],
                    "github": "https://github.com/example",
                },
            },
        },
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def _trim_names(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v is not None else v

    @field_validator("gender", mode="before")
    @classmethod
    def _lowercase_gender(cls, v: Any) -> Any:
        """Accept ``Others`` and other casings of the allowed values."""
        return v.strip().lower() if isinstance(v, str) else v

    def to_changes(self) -> dict[str, Any]:
        """Return the explicitly set fields as domain values."""
        changes = self.model_dump(exclude_unset=True)
        if "photos" in changes:
            changes["photos"] = [p.to_domain() for p in self.photos or []]
        if "dev" in changes:
            changes["dev"] = self.dev.to_domain() if self.dev else None
        return changes


class PhotoResponse(CamelModel):
    url: str
    is_primary: bool


class DevProfileResponse(CamelModel):
    role: Optional[str] = None
    years_of_experience: Optional[int] = None
    skills: list[str] = Field(default_factory=list)
    linked_in: Optional[str] = None
    github: Optional[str] = None


class UserResponse(CamelModel):
    """Response schema for user data. Never includes the password hash."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    birth_date: Optional[date] = None
    gender: Optional[GenderLiteral] = None
    bio: str
    photos: list[PhotoResponse] = Field(default_factory=list)
    primary_photo: Optional[PhotoResponse] = None
    dev: Optional[DevProfileResponse] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        primary = user.primary_photo
        primary_photo = (
            PhotoResponse(url=primary.url, is_primary=True) if primary else None
        )
        dev = None
        if user.dev is not None:
            dev = DevProfileResponse(
                role=user.dev.role,
                years_of_experience=user.dev.years_of_experience,
                skills=list(user.dev.skills),
                linked_in=user.dev.linkedin,
                github=user.dev.github,
            )
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            birth_date=user.birth_date,
            gender=user.gender.value if user.gender else None,
            bio=user.bio,
            photos=[
                PhotoResponse(url=p.url, is_primary=p.is_primary) for p in user.photos
            ],
            primary_photo=primary_photo,
            dev=dev,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
