"""DevConnect Auth - Generic authentication infrastructure.

This package provides authentication building blocks that are independent
of the user/profile domain. It handles:
- Password hashing (bcrypt)
- Session token creation and verification (JWT)

Architecture:
    devconnect_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from devconnect_auth import PasswordHashingService, JWTService
"""

from devconnect_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    PasswordHashingError,
    TokenError,
    TokenExpiredError,
    TokenSigningError,
)
from devconnect_auth.schemas import TokenPayload
from devconnect_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "TokenError",
    "InvalidTokenError",
    "TokenExpiredError",
    "PasswordHashingError",
    "TokenSigningError",
]
