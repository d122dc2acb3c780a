"""User aggregate: identity, credential hash and public profile."""

from __future__ import annotations

from copy import copy
from datetime import date, datetime
from typing import Any, Iterable, Union
from uuid import UUID, uuid4

from devconnect.domain.shared.time import utc_now
from devconnect.domain.user.exceptions import InvalidProfileError
from devconnect.domain.user.value_objects import DevProfile, Email, Gender, Photo

DEFAULT_BIO = "No bio yet"
FIRST_NAME_MIN_LENGTH = 5
NAME_MAX_LENGTH = 50
BIO_MAX_LENGTH = 500

# Fields a profile update may touch. id, email and password_hash never change here.
PROFILE_FIELDS = frozenset(
    {"first_name", "last_name", "birth_date", "gender", "bio", "photos", "dev"},
)


class User:
    """
    User aggregate root.

    The password hash is only present when the repository was explicitly
    asked for it (the login path). Everything handed back to callers goes
    through ``without_credentials()`` first.
    """

    def __init__(
        self,
        email: Union[str, Email],
        first_name: str,
        last_name: str = "",
        password_hash: str | None = None,
        id: UUID | None = None,
        birth_date: date | None = None,
        gender: Union[str, Gender, None] = None,
        bio: str = DEFAULT_BIO,
        photos: Iterable[Photo] = (),
        dev: DevProfile | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id or uuid4()
        self._password_hash = password_hash
        self._first_name = self._clean_first_name(first_name)
        self._last_name = self._clean_last_name(last_name)
        self._birth_date = birth_date
        self._gender = self._clean_gender(gender)
        self._bio = self._clean_bio(bio)
        self._photos = self._clean_photos(photos)
        self._dev = dev
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str | None:
        return self._password_hash

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def birth_date(self) -> date | None:
        return self._birth_date

    @property
    def gender(self) -> Gender | None:
        return self._gender

    @property
    def bio(self) -> str:
        return self._bio

    @property
    def photos(self) -> tuple[Photo, ...]:
        return self._photos

    @property
    def primary_photo(self) -> Photo | None:
        return next((p for p in self._photos if p.is_primary), None)

    @property
    def dev(self) -> DevProfile | None:
        return self._dev

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(self, **changes: Any) -> None:
        """Apply a partial profile update.

        Raises
        ------
        InvalidProfileError
            If a field is not a profile field or its value breaks a rule
        """
        unknown = set(changes) - PROFILE_FIELDS
        if unknown:
            field = sorted(unknown)[0]
            raise InvalidProfileError(field, f"Field '{field}' cannot be updated")

        if "first_name" in changes:
            self._first_name = self._clean_first_name(changes["first_name"])
        if "last_name" in changes:
            self._last_name = self._clean_last_name(changes["last_name"])
        if "birth_date" in changes:
            self._birth_date = changes["birth_date"]
        if "gender" in changes:
            self._gender = self._clean_gender(changes["gender"])
        if "bio" in changes:
            self._bio = self._clean_bio(changes["bio"])
        if "photos" in changes:
            self._photos = self._clean_photos(changes["photos"] or ())
        if "dev" in changes:
            self._dev = changes["dev"]

        self._updated_at = utc_now()

    def without_credentials(self) -> User:
        """Return a copy of this user with the password hash removed."""
        stripped = copy(self)
        stripped._password_hash = None
        return stripped

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        password_hash: str,
        first_name: str,
        last_name: str = "",
    ) -> User:
        return cls(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        )

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: Union[str, Email],
        first_name: str,
        last_name: str,
        created_at: datetime,
        updated_at: datetime,
        password_hash: str | None = None,
        birth_date: date | None = None,
        gender: Union[str, Gender, None] = None,
        bio: str = DEFAULT_BIO,
        photos: Iterable[Photo] = (),
        dev: DevProfile | None = None,
    ) -> User:
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            birth_date=birth_date,
            gender=gender,
            bio=bio,
            photos=photos,
            dev=dev,
            created_at=created_at,
            updated_at=updated_at,
        )

    @staticmethod
    def _clean_first_name(value: str) -> str:
        value = (value or "").strip()
        if not FIRST_NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
            msg = (
                f"First name must be between {FIRST_NAME_MIN_LENGTH} "
                f"and {NAME_MAX_LENGTH} characters"
            )
            raise InvalidProfileError("first_name", msg)
        return value

    @staticmethod
    def _clean_last_name(value: str) -> str:
        value = (value or "").strip()
        if len(value) > NAME_MAX_LENGTH:
            msg = f"Last name must be at most {NAME_MAX_LENGTH} characters"
            raise InvalidProfileError("last_name", msg)
        return value

    @staticmethod
    def _clean_gender(value: Union[str, Gender, None]) -> Gender | None:
        if value is None:
            return None
        try:
            return Gender.parse(value)
        except ValueError as e:
            msg = "Gender must be one of: male, female, others"
            raise InvalidProfileError("gender", msg) from e

    @staticmethod
    def _clean_bio(value: str | None) -> str:
        if value is None:
            return DEFAULT_BIO
        if len(value) > BIO_MAX_LENGTH:
            msg = f"Bio must be at most {BIO_MAX_LENGTH} characters"
            raise InvalidProfileError("bio", msg)
        return value

    @staticmethod
    def _clean_photos(photos: Iterable[Photo]) -> tuple[Photo, ...]:
        photos = tuple(photos)
        if sum(1 for p in photos if p.is_primary) > 1:
            msg = "Only one photo can be marked as primary"
            raise InvalidProfileError("photos", msg)
        return photos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
