"""Unit tests for user value objects."""

import pytest

from devconnect.domain.user import (
    DevProfile,
    Email,
    Gender,
    InvalidEmailError,
    InvalidProfileError,
    Photo,
    normalize_email,
)


class TestEmail:
    """Tests for the Email value object."""

    def test_normalizes_case_and_whitespace(self):
        """Test that emails are trimmed and lowercased."""
        assert Email("  A@B.com ").value == "a@b.com"

    def test_normalize_is_idempotent(self):
        """Test that normalizing twice changes nothing."""
        once = normalize_email(" Dev@Example.com ")
        assert normalize_email(once) == once

    def test_equal_after_normalization(self):
        """Test that differently cased addresses compare equal."""
        assert Email("a@b.com") == Email("A@B.COM")

    @pytest.mark.parametrize("value", ["", "plainaddress", "a@b", "@example.com"])
    def test_invalid_email_raises(self, value):
        """Test that malformed addresses are rejected."""
        with pytest.raises(InvalidEmailError):
            Email(value)

    @pytest.mark.parametrize(
        "value", ["o'brien@example.com", "josé@example.com", "first+tag@example.com"]
    )
    def test_accepts_addresses_valid_for_request_schema(self, value):
        """Test that apostrophes and non-ASCII local parts are accepted."""
        assert Email(value).value == value

    def test_invalid_email_carries_field_error(self):
        """Test that the error points at the email field."""
        with pytest.raises(InvalidEmailError) as exc_info:
            Email("nope")

        assert exc_info.value.field_errors[0]["path"] == "email"

    def test_str(self):
        """Test string conversion."""
        assert str(Email("dev@example.com")) == "dev@example.com"


class TestGender:
    """Tests for gender parsing."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("male", Gender.MALE), ("Female", Gender.FEMALE), ("Others", Gender.OTHERS)],
    )
    def test_parse(self, raw, expected):
        """Test case-insensitive parsing."""
        assert Gender.parse(raw) is expected

    def test_parse_unknown_raises(self):
        """Test that unknown values raise ValueError."""
        with pytest.raises(ValueError):
            Gender.parse("unknown")


class TestPhoto:
    """Tests for the Photo value object."""

    def test_valid_photo(self):
        """Test a valid photo with defaults."""
        photo = Photo(url=" https://example.com/me.png ")

        assert photo.url == "https://example.com/me.png"
        assert photo.is_primary is False

    def test_invalid_url_raises(self):
        """Test that non-http URLs are rejected."""
        with pytest.raises(InvalidProfileError):
            Photo(url="ftp://example.com/me.png")

    def test_dict_roundtrip(self):
        """Test the storage representation."""
        photo = Photo(url="https://example.com/me.png", is_primary=True)
        assert Photo.from_dict(photo.to_dict()) == photo


class TestDevProfile:
    """Tests for the DevProfile value object."""

    def test_defaults(self):
        """Test that every field is optional."""
        dev = DevProfile()

        assert dev.role is None
        assert dev.skills == ()

    def test_cleans_skills(self):
        """Test that blank skills are dropped and others trimmed."""
        dev = DevProfile(skills=(" python ", "", "  ", "sql"))

        assert dev.skills == ("python", "sql")

    @pytest.mark.parametrize("years", [0, 25, 50])
    def test_years_in_range(self, years):
        """Test accepted experience values."""
        assert DevProfile(years_of_experience=years).years_of_experience == years

    @pytest.mark.parametrize("years", [-1, 51])
    def test_years_out_of_range(self, years):
        """Test that experience outside 0 to 50 is rejected."""
        with pytest.raises(InvalidProfileError) as exc_info:
            DevProfile(years_of_experience=years)

        assert exc_info.value.field == "dev.years_of_experience"

    def test_invalid_social_url(self):
        """Test that social links must be URLs."""
        with pytest.raises(InvalidProfileError) as exc_info:
            DevProfile(github="github.com/someone")

        assert exc_info.value.field == "dev.github"

    def test_dict_roundtrip(self):
        """Test the storage representation."""
        dev = DevProfile(
            role="Backend Engineer",
            years_of_experience=4,
            skills=("python", "postgres"),
            linkedin="https://linkedin.com/in/someone",
            github="https://github.com/someone",
        )
        assert DevProfile.from_dict(dev.to_dict()) == dev
