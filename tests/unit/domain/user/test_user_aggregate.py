"""Unit tests for the User aggregate."""

from datetime import date, datetime, timezone
from uuid import uuid4

import pytest

from devconnect.domain.user import (
    PROFILE_FIELDS,
    DevProfile,
    Gender,
    InvalidEmailError,
    InvalidProfileError,
    Photo,
    User,
)


def _make_user(**overrides) -> User:
    data = {
        "email": "dev@example.com",
        "password_hash": "$2b$10$abcdefghijklmnopqrstuv",
        "first_name": "Alice",
        "last_name": "Smith",
    }
    data.update(overrides)
    return User.create(**data)


class TestUserCreate:
    """Tests for creating a new user."""

    def test_create_generates_id_and_timestamps(self):
        """Test that create assigns an id and UTC timestamps."""
        user = _make_user()

        assert user.id is not None
        assert user.created_at.tzinfo is not None
        assert user.updated_at.tzinfo is not None

    def test_create_normalizes_email(self):
        """Test that the email is trimmed and lowercased."""
        user = _make_user(email="  Dev@Example.COM ")

        assert user.email == "dev@example.com"

    def test_create_invalid_email_raises(self):
        """Test that a malformed email is rejected."""
        with pytest.raises(InvalidEmailError):
            _make_user(email="not-an-email")

    def test_create_applies_profile_defaults(self):
        """Test the default profile values."""
        user = _make_user()

        assert user.bio == "No bio yet"
        assert user.photos == ()
        assert user.primary_photo is None
        assert user.dev is None
        assert user.gender is None
        assert user.birth_date is None

    def test_create_trims_names(self):
        """Test that names are trimmed."""
        user = _make_user(first_name="  Alice  ", last_name=" Smith ")

        assert user.first_name == "Alice"
        assert user.last_name == "Smith"

    @pytest.mark.parametrize("first_name", ["Bob", "    ", "x" * 51])
    def test_create_invalid_first_name_raises(self, first_name):
        """Test the first name length rule (5 to 50 characters)."""
        with pytest.raises(InvalidProfileError) as exc_info:
            _make_user(first_name=first_name)

        assert exc_info.value.field == "first_name"

    def test_create_long_last_name_raises(self):
        """Test that the last name is capped at 50 characters."""
        with pytest.raises(InvalidProfileError):
            _make_user(last_name="x" * 51)

    def test_empty_last_name_allowed(self):
        """Test that the last name may be empty."""
        assert _make_user(last_name="").last_name == ""


class TestUserCredentials:
    """Tests for credential handling."""

    def test_without_credentials_strips_hash(self):
        """Test that the stripped copy carries no password hash."""
        user = _make_user()
        stripped = user.without_credentials()

        assert stripped.password_hash is None
        # The source user keeps its hash
        assert user.password_hash is not None

    def test_without_credentials_keeps_identity(self):
        """Test that the stripped copy equals the source user by id."""
        user = _make_user()
        stripped = user.without_credentials()

        assert stripped == user
        assert stripped.email == user.email
        assert hash(stripped) == hash(user)

    def test_repr_hides_hash(self):
        """Test that the hash does not leak into repr."""
        user = _make_user()
        assert "$2b$" not in repr(user)


class TestUserProfileUpdate:
    """Tests for partial profile updates."""

    def setup_method(self):
        """Set up test fixtures."""
        self.user = _make_user()

    def test_update_bio(self):
        """Test that a single field update leaves others untouched."""
        self.user.update_profile(bio="Backend developer")

        assert self.user.bio == "Backend developer"
        assert self.user.first_name == "Alice"

    def test_update_bumps_updated_at(self):
        """Test that updated_at moves forward."""
        before = self.user.updated_at
        self.user.update_profile(bio="changed")

        assert self.user.updated_at >= before

    def test_update_gender_parses_case_insensitively(self):
        """Test gender parsing."""
        self.user.update_profile(gender="Others")

        assert self.user.gender is Gender.OTHERS

    def test_update_invalid_gender_raises(self):
        """Test that unknown genders are rejected."""
        with pytest.raises(InvalidProfileError) as exc_info:
            self.user.update_profile(gender="robot")

        assert exc_info.value.field == "gender"

    def test_update_bio_too_long_raises(self):
        """Test the 500 character bio limit."""
        with pytest.raises(InvalidProfileError):
            self.user.update_profile(bio="x" * 501)

    def test_update_bio_none_restores_default(self):
        """Test that clearing the bio restores the default text."""
        self.user.update_profile(bio="something")
        self.user.update_profile(bio=None)

        assert self.user.bio == "No bio yet"

    def test_update_photos_and_primary(self):
        """Test photos and the primary photo lookup."""
        photos = [
            Photo(url="https://example.com/a.png"),
            Photo(url="https://example.com/b.png", is_primary=True),
        ]
        self.user.update_profile(photos=photos)

        assert len(self.user.photos) == 2
        assert self.user.primary_photo.url == "https://example.com/b.png"

    def test_two_primary_photos_rejected(self):
        """Test that only one photo can be primary."""
        photos = [
            Photo(url="https://example.com/a.png", is_primary=True),
            Photo(url="https://example.com/b.png", is_primary=True),
        ]
        with pytest.raises(InvalidProfileError):
            self.user.update_profile(photos=photos)

    def test_update_dev_profile(self):
        """Test setting and clearing the developer profile."""
        dev = DevProfile(role="Backend", years_of_experience=3, skills=("python",))
        self.user.update_profile(dev=dev)
        assert self.user.dev == dev

        self.user.update_profile(dev=None)
        assert self.user.dev is None

    def test_update_birth_date(self):
        """Test setting the birth date."""
        self.user.update_profile(birth_date=date(1990, 5, 17))

        assert self.user.birth_date == date(1990, 5, 17)

    @pytest.mark.parametrize("field", ["email", "password_hash", "id", "created_at"])
    def test_non_profile_fields_rejected(self, field):
        """Test that identity and credential fields cannot be updated."""
        with pytest.raises(InvalidProfileError) as exc_info:
            self.user.update_profile(**{field: "x"})

        assert exc_info.value.field == field
        assert self.user.email == "dev@example.com"

    def test_profile_fields_exclude_credentials(self):
        """Test the set of updatable fields."""
        assert "email" not in PROFILE_FIELDS
        assert "password_hash" not in PROFILE_FIELDS
        assert "bio" in PROFILE_FIELDS


class TestUserReconstitute:
    """Tests for rebuilding a user from storage."""

    def test_reconstitute_preserves_fields(self):
        """Test that reconstitute keeps stored values."""
        user_id = uuid4()
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        user = User.reconstitute(
            id=user_id,
            email="dev@example.com",
            first_name="Alice",
            last_name="Smith",
            created_at=created,
            updated_at=created,
            gender="female",
            bio="hello",
        )

        assert user.id == user_id
        assert user.created_at == created
        assert user.gender is Gender.FEMALE
        assert user.bio == "hello"
        assert user.password_hash is None
