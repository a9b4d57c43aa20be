"""Settings loader and singleton manager.

This module handles:
- Environment variable loading from .env files
- Configuration file loading from TOML
- Thread-safe singleton pattern for Settings instance
- API key validation for the production wiring
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

import toml
from dotenv import load_dotenv

from cinecache.config.models.settings import Settings
from cinecache.shared.errors import (
    ErrorCode,
    ErrorContext,
    SecurityError,
    create_config_error,
)

logger = logging.getLogger(__name__)

# Plain environment variable accepted for the TMDB credential
TMDB_API_KEY_ENV = "TMDB_API_KEY"

DEFAULT_CONFIG_PATHS: tuple[Path, ...] = (
    Path("config/config.toml"),
    Path("config.toml"),
)


class SettingsLoader:
    """Thread-safe singleton manager for Settings.

    Uses double-checked locking to minimize lock overhead.
    """

    _instance: Settings | None = None
    _lock: threading.RLock = threading.RLock()

    def get_config(self) -> Settings:
        """Get the global settings instance, loading it if necessary."""
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    SettingsLoader._instance = load_settings()

        return self._instance  # type: ignore[return-value]

    def reload_config(self) -> Settings:
        """Reload the global settings instance from configuration files."""
        with self._lock:
            SettingsLoader._instance = load_settings()

        return SettingsLoader._instance

    def reset(self) -> None:
        """Drop the cached instance (used by tests)."""
        with self._lock:
            SettingsLoader._instance = None


_loader = SettingsLoader()


def get_config() -> Settings:
    """Return the process-wide Settings instance."""
    return _loader.get_config()


def reload_config() -> Settings:
    """Reload and return the process-wide Settings instance."""
    return _loader.reload_config()


def _load_env_file(env_file: Path = Path(".env")) -> None:
    """Load environment variables from a .env file if one exists.

    Existing environment variables win over the file.
    """
    if env_file.exists():
        load_dotenv(env_file, override=False)
        logger.debug("Loaded environment from %s", env_file)


def _apply_api_key_fallback(settings: Settings) -> Settings:
    """Fill the TMDB api key from ``TMDB_API_KEY`` when not configured."""
    if settings.api.tmdb.api_key:
        return settings

    api_key = os.getenv(TMDB_API_KEY_ENV, "").strip()
    if api_key:
        settings.api.tmdb.api_key = api_key
    return settings


def _load_toml(path: Path) -> Settings:
    try:
        return Settings.from_toml_file(path)
    except toml.TomlDecodeError as e:
        raise create_config_error(
            f"Malformed configuration file {path}: {e}",
            config_key=str(path),
            operation="load_settings",
            original_error=e,
        ) from e


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from TOML configuration file or environment.

    Args:
        config_path: Optional path to TOML configuration file. If None, the
            default locations are tried before falling back to environment
            variables only.

    Returns:
        Settings instance loaded from the specified source

    Raises:
        ApplicationError: If the TOML file cannot be parsed
    """
    _load_env_file()

    if config_path:
        return _apply_api_key_fallback(_load_toml(Path(config_path)))

    for default_path in DEFAULT_CONFIG_PATHS:
        if default_path.exists():
            return _apply_api_key_fallback(_load_toml(default_path))

    return _apply_api_key_fallback(Settings())


def require_api_key(settings: Settings) -> str:
    """Return the configured TMDB api key.

    Raises:
        SecurityError: If no api key is configured
    """
    api_key = settings.api.tmdb.api_key.strip()
    if not api_key:
        raise SecurityError(
            code=ErrorCode.MISSING_CONFIG,
            message=(
                "TMDB api key not configured. Set TMDB_API_KEY or "
                "CINECACHE_API__TMDB__API_KEY, or add it to config.toml."
            ),
            context=ErrorContext(operation="require_api_key"),
        )
    return api_key
