"""User value objects."""

from devconnect.domain.user.value_objects.dev_profile import DevProfile
from devconnect.domain.user.value_objects.email import Email, normalize_email
from devconnect.domain.user.value_objects.gender import Gender
from devconnect.domain.user.value_objects.photo import Photo

__all__ = [
    "DevProfile",
    "Email",
    "Gender",
    "Photo",
    "normalize_email",
]
