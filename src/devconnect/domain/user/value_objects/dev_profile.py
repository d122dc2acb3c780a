"""Developer profile value object.

Professional details a developer can attach to their profile: role,
experience, skills and social links.
"""

from dataclasses import dataclass, field
from typing import Any

from devconnect.domain.user.exceptions import InvalidProfileError
from devconnect.domain.user.value_objects.urls import is_valid_url

MIN_YEARS_OF_EXPERIENCE = 0
MAX_YEARS_OF_EXPERIENCE = 50


@dataclass(frozen=True)
class DevProfile:
    """Value object for the embedded developer profile. All fields optional."""

    role: str | None = None
    years_of_experience: int | None = None
    skills: tuple[str, ...] = field(default_factory=tuple)
    linkedin: str | None = None
    github: str | None = None

    def __post_init__(self) -> None:
        if self.role is not None:
            object.__setattr__(self, "role", self.role.strip())

        years = self.years_of_experience
        if years is not None and not (
            MIN_YEARS_OF_EXPERIENCE <= years <= MAX_YEARS_OF_EXPERIENCE
        ):
            msg = (
                f"Years of experience must be between {MIN_YEARS_OF_EXPERIENCE} "
                f"and {MAX_YEARS_OF_EXPERIENCE}"
            )
            raise InvalidProfileError("dev.years_of_experience", msg)

        skills = tuple(s.strip() for s in self.skills if s and s.strip())
        object.__setattr__(self, "skills", skills)

        for name in ("linkedin", "github"):
            value = getattr(self, name)
            if value is None:
                continue
            value = value.strip()
            if not is_valid_url(value):
                msg = f"{name} must be a valid http(s) URL"
                raise InvalidProfileError(f"dev.{name}", msg)
            object.__setattr__(self, name, value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role,
            "years_of_experience": self.years_of_experience,
            "skills": list(self.skills),
            "linkedin": self.linkedin,
            "github": self.github,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DevProfile":
        return cls(
            role=data.get("role"),
            years_of_experience=data.get("years_of_experience"),
            skills=tuple(data.get("skills") or ()),
            linkedin=data.get("linkedin"),
            github=data.get("github"),
        )
