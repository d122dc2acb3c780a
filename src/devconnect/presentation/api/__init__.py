"""DevConnect HTTP API (FastAPI)."""

from devconnect.presentation.api.app import API_V1_PREFIX, create_app

__all__ = ["API_V1_PREFIX", "create_app"]
