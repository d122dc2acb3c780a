"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.

Run with uvicorn's factory mode so settings are only read at startup:
    uvicorn devconnect.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devconnect.presentation.api.config import get_api_settings
from devconnect.presentation.api.dependencies import (
    create_tables,
    get_engine,
    get_password_service,
)
from devconnect.presentation.api.exception_handlers import setup_exception_handlers
from devconnect.presentation.api.routers import auth_router, users_router
from devconnect_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the devconnect application with:
    - Console output with timestamps and module names
    - Configurable log level for devconnect modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("devconnect").setLevel(log_level)
    logging.getLogger("devconnect_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Account registration and session management.

**Registration & Login:**
- Register with email, password, first and last name
- Login sets an HttpOnly `access_token` cookie
- Logout clears the cookie

**Security:**
- Passwords are hashed with bcrypt
- Sessions are stateless signed JWTs with a short lifetime
- A token stays valid until it expires, even after logout
""",
    },
    {
        "name": "Users",
        "description": """The authenticated user's own profile.

**Profile fields:** name, birth date, gender, bio, photos and an
optional developer profile (role, experience, skills, LinkedIn, GitHub).
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


def create_lifespan(settings: Settings):
    """Build the lifespan manager bound to ``settings``."""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
        engine = get_engine(settings.database_url)
        try:
            await create_tables(engine)
        except (ConnectionRefusedError, OSError):
            logger.critical("Could not connect to the database.")
            raise SystemExit(1) from None

        # Build the shared hasher (and its dummy hash) before the first login
        get_password_service(settings)

        yield

        # Shutdown - dispose the shared engine and its connection pool
        logger.info("Shutting down %s API...", settings.app_name)
        await engine.dispose()
        logger.info("Database connections closed")

    return lifespan


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override (tests). When given, every dependency
        that needs settings receives this instance.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User registration, authentication and developer profiles.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=create_lifespan(settings),
        openapi_tags=OPENAPI_TAGS,
    )

    app.dependency_overrides[get_api_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint (unversioned)."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    return app
