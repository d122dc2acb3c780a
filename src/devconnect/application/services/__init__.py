"""Application services."""

from devconnect.application.services.authentication_service import (
    AuthenticationService,
)
from devconnect.application.services.profile_service import ProfileService

__all__ = [
    "AuthenticationService",
    "ProfileService",
]
