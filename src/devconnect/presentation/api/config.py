"""API configuration adapter.

Bridges the centralized devconnect_config settings with the API layer.
``create_app(settings)`` overrides this dependency when settings are
injected explicitly.
"""

from devconnect_config.settings import Settings, get_settings


def get_api_settings() -> Settings:
    """Get settings from centralized configuration."""
    return get_settings()
