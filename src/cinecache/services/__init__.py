"""Services for CineCache.

Remote client, local store, connectivity probe and the repository that
composes them.
"""

from cinecache.services.connectivity import ConnectivityProbe
from cinecache.services.repository import (
    FetchRoute,
    MovieRepository,
    choose_route,
    resolve_fallback,
)
from cinecache.services.sqlite_cache import MovieStore
from cinecache.services.tmdb import TMDBClient

__all__ = [
    "ConnectivityProbe",
    "FetchRoute",
    "MovieRepository",
    "MovieStore",
    "TMDBClient",
    "choose_route",
    "resolve_fallback",
]
