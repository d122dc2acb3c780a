"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (no database)
    │   ├── devconnect_auth/   # Password hashing and session tokens
    │   ├── domain/            # User aggregate and value objects
    │   ├── application/       # Services with mocked repositories
    │   └── presentation/      # CLI and schema tests
    └── integration/           # SQLite-backed tests
        ├── persistence/       # Repository against a real database
        └── api/               # FastAPI endpoints through TestClient

Integration tests run against SQLite (aiosqlite), so they need no external
services and are not skipped by default. Set ``SKIP_INTEGRATION=1`` or pass
``--skip-integration`` to run only the unit tests.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from devconnect_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")

# Required settings, so get_settings() works without a local .env file
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("POSTGRES_PASSWORD", "test-password")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--skip-integration",
        action="store_true",
        default=False,
        help="Skip tests marked with @pytest.mark.integration",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that run against a SQLite database",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests when explicitly requested."""
    skip_requested = config.getoption("--skip-integration") or os.environ.get(
        "SKIP_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")

    if not skip_requested:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration tests disabled via --skip-integration",
    )
    for item in items:
        if "integration" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def configure_app_settings():
    """Give every test a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
