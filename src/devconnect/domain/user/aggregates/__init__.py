from devconnect.domain.user.aggregates.user import PROFILE_FIELDS, User

__all__ = ["PROFILE_FIELDS", "User"]
