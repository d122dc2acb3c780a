"""Unit tests for application settings."""

import pytest
from pydantic import SecretStr
from pydantic import ValidationError as PydanticValidationError

from devconnect_config import Settings, clear_settings_cache, get_settings


def _settings(**overrides) -> Settings:
    values = {
        "jwt_secret_key": SecretStr("secret"),
        "postgres_password": SecretStr("pw"),
    }
    values.update(overrides)
    return Settings(**values)


class TestSettings:
    """Tests for defaults and computed values."""

    def test_defaults(self, monkeypatch):
        """Unset values fall back to the documented defaults."""
        for name in (
            "JWT_ACCESS_TOKEN_EXPIRE_MINUTES",
            "BCRYPT_ROUNDS",
            "API_COOKIE_SAMESITE",
            "API_PORT",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = _settings()

        assert settings.jwt_access_token_expire_minutes == 2
        assert settings.jwt_algorithm == "HS256"
        assert settings.bcrypt_rounds == 10
        assert settings.api_cookie_samesite == "strict"
        assert settings.api_port == 3000

    def test_database_url(self):
        """The asyncpg URL is assembled from its parts."""
        settings = _settings(
            postgres_user="app",
            postgres_host="db",
            postgres_port=5433,
            postgres_db="devconnect",
        )

        assert settings.database_url == "postgresql+asyncpg://app:pw@db:5433/devconnect"

    def test_cors_origins_parsing(self):
        """Comma-separated origins become a list."""
        settings = _settings(api_cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_cors_origins_from_list(self):
        """A list of origins is accepted too."""
        settings = _settings(api_cors_origins=["http://a.test", "http://b.test"])

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_secret_not_in_repr(self):
        """Secrets are masked."""
        settings = _settings(jwt_secret_key=SecretStr("super-secret-value"))

        assert "super-secret-value" not in repr(settings)

    def test_unsupported_algorithm_rejected(self):
        """Only HMAC algorithms are allowed."""
        with pytest.raises(PydanticValidationError):
            _settings(jwt_algorithm="RS256")

    def test_environment_overrides(self, monkeypatch):
        """Environment variables configure the token lifetime."""
        monkeypatch.setenv("JWT_ACCESS_TOKEN_EXPIRE_MINUTES", "15")

        assert _settings().jwt_access_token_expire_minutes == 15


class TestGetSettings:
    """Tests for the cached accessor."""

    def test_cached(self):
        """The same instance is returned until the cache is cleared."""
        first = get_settings()

        assert get_settings() is first
        clear_settings_cache()
        assert get_settings() is not first
