"""Configuration models package.

Domain models for each configuration area plus the Settings facade.
"""

from cinecache.config.models.api_settings import APISettings, TMDBSettings
from cinecache.config.models.app_settings import LoggingSettings
from cinecache.config.models.cache_settings import CacheSettings
from cinecache.config.models.connectivity_settings import ConnectivitySettings
from cinecache.config.models.settings import Settings

__all__ = [
    "APISettings",
    "CacheSettings",
    "ConnectivitySettings",
    "LoggingSettings",
    "Settings",
    "TMDBSettings",
]
