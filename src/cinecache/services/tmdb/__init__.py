"""TMDB remote catalog client."""

from cinecache.services.tmdb.tmdb_client import TMDBClient

__all__ = ["TMDBClient"]
