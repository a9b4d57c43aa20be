"""SQLite-backed local movie store.

Separates schema creation and transaction handling from the store facade.
"""

from cinecache.services.sqlite_cache.cache_db import MovieStore

__all__ = ["MovieStore"]
