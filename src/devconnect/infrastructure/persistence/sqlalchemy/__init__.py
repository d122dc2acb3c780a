"""SQLAlchemy persistence for the user store."""

from devconnect.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from devconnect.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
