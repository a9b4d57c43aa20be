"""CineCache Configuration Module

Unified access to configuration models and settings management:
- Settings: Main configuration facade
- Loader functions: get_config, load_settings, reload_config, require_api_key
- Domain models: API, Cache, Connectivity, Logging settings
"""

from __future__ import annotations

from .loader import get_config, load_settings, reload_config, require_api_key
from .models import (
    APISettings,
    CacheSettings,
    ConnectivitySettings,
    LoggingSettings,
    Settings,
    TMDBSettings,
)

__all__ = [
    "APISettings",
    "CacheSettings",
    "ConnectivitySettings",
    "LoggingSettings",
    "Settings",
    "TMDBSettings",
    "get_config",
    "load_settings",
    "reload_config",
    "require_api_key",
]
