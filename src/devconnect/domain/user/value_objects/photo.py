"""Photo value object for the user's profile gallery."""

from dataclasses import dataclass
from typing import Any

from devconnect.domain.user.exceptions import InvalidProfileError
from devconnect.domain.user.value_objects.urls import is_valid_url


@dataclass(frozen=True)
class Photo:
    """A profile photo. At most one photo per user may be primary."""

    url: str
    is_primary: bool = False

    def __post_init__(self) -> None:
        url = self.url.strip() if self.url else ""
        if not is_valid_url(url):
            msg = "Photo URL must be a valid http(s) URL"
            raise InvalidProfileError("photos.url", msg)
        object.__setattr__(self, "url", url)

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "is_primary": self.is_primary}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Photo":
        return cls(url=data["url"], is_primary=bool(data.get("is_primary", False)))
