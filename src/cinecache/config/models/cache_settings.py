"""Local movie store configuration model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from cinecache.shared.constants import MovieStoreConfig


class CacheSettings(BaseModel):
    """Local store configuration.

    ``db_path`` may be ``:memory:`` for a throwaway cache.
    """

    db_path: str = Field(
        default=MovieStoreConfig.DEFAULT_DB_PATH,
        description="SQLite database file for cached movies",
    )


__all__ = ["CacheSettings"]
