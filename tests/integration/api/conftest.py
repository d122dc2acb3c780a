"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from devconnect.infrastructure.persistence.sqlalchemy import Base
from devconnect.presentation.api.app import API_V1_PREFIX, create_app
from devconnect.presentation.api.dependencies import get_db_session
from devconnect_auth import JWTService
from devconnect_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        # Required security settings
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        postgres_password=SecretStr("test-password"),
        # API settings
        api_host="127.0.0.1",
        api_port=3000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        api_cookie_secure=False,  # Allow HTTP in tests
        # Low work factor for fast tests
        bcrypt_rounds=4,
    )


@pytest.fixture
async def test_db_engine(tmp_path):
    """Create a file-backed SQLite database for testing.

    NullPool keeps connections from outliving the event loop that opened
    them; TestClient serves requests on its own loop.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'devconnect-test.db'}",
        echo=False,
        poolclass=NullPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_client(api_settings, test_db_engine) -> TestClient:
    """Create a test client backed by the test database."""
    app = create_app(settings=api_settings)

    # Create a session maker that uses our test engine
    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    return TestClient(app)


@pytest.fixture
def jwt_service(api_settings) -> JWTService:
    """Token service sharing the app's secret, for crafting tokens."""
    return JWTService(
        secret_key=api_settings.jwt_secret_key.get_secret_value(),
        access_token_expire_minutes=api_settings.jwt_access_token_expire_minutes,
    )


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "email": "dev@example.com",
        "password": "longenough1",
        "firstName": "Alice",
        "lastName": "Smith",
    }


@pytest.fixture
def registered_user(test_client, api_v1_prefix, registered_user_data) -> dict:
    """Register the test user and return the response's user object."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/register",
        json=registered_user_data,
    )
    assert response.status_code == 201, response.text
    return response.json()["user"]


@pytest.fixture
def access_token(
    test_client,
    api_v1_prefix,
    registered_user,
    registered_user_data,
) -> str:
    """Log the test user in and return the session token from the cookie."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={
            "email": registered_user_data["email"],
            "password": registered_user_data["password"],
        },
    )
    assert response.status_code == 200, response.text
    token = response.cookies.get("access_token")
    assert token
    return token


@pytest.fixture
def auth_headers(access_token) -> dict:
    """Bearer headers for the logged-in test user."""
    return {"Authorization": f"Bearer {access_token}"}
