"""Schema management for the movie store."""

from cinecache.services.sqlite_cache.migration.manager import MigrationManager

__all__ = ["MigrationManager"]
