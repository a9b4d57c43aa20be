"""API configuration models (TMDB).

This module contains configuration models for the remote catalog
service.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from cinecache.shared.constants import TMDBDefaults


class TMDBSettings(BaseModel):
    """TMDB API configuration.

    Security: api_key is masked in __repr__ to prevent accidental
    exposure in logs.
    """

    api_key: str = Field(
        default="",
        repr=False,
        description="TMDB API key attached to every request",
    )
    base_url: str = Field(
        default=TMDBDefaults.BASE_URL,
        description="TMDB v3 base URL",
    )
    language: str = Field(
        default=TMDBDefaults.LANGUAGE,
        description="Language code sent with every request",
    )
    timeout: float = Field(
        default=TMDBDefaults.TIMEOUT,
        gt=0,
        description="Total request timeout in seconds",
    )

    def __repr__(self) -> str:
        """Custom repr that masks sensitive api_key."""
        masked_key = "****" if self.api_key else "[empty]"
        return (
            f"TMDBSettings("
            f"api_key={masked_key}, "
            f"base_url={self.base_url}, "
            f"language={self.language}, "
            f"timeout={self.timeout})"
        )


class APISettings(BaseModel):
    """API configuration container."""

    tmdb: TMDBSettings = Field(
        default_factory=TMDBSettings,
        description="TMDB API configuration",
    )


__all__ = [
    "APISettings",
    "TMDBSettings",
]
