"""Pure auth services: password hashing and session tokens."""

from devconnect_auth.services.jwt_service import JWTService
from devconnect_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
