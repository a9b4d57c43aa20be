"""Service protocols for dependency inversion.

The repository depends only on these protocols, so the production
TMDB client, SQLite store and connectivity probe can be swapped for
fakes in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from cinecache.shared.models.movie import MovieDetail, MovieSummary


@runtime_checkable
class MovieRemoteProtocol(Protocol):
    """Remote catalog service.

    Implementations raise :class:`cinecache.shared.errors.RemoteError` on
    transport failure, non-success status, timeout or malformed payload.
    No retry is expected.

    Example:
        >>> client: MovieRemoteProtocol = TMDBClient()
        >>> movies = await client.fetch_trending("en-US", api_key)
    """

    async def fetch_trending(self, language: str, api_key: str) -> list[MovieSummary]:
        """Fetch the weekly trending movie list."""
        ...

    async def fetch_detail(
        self,
        movie_id: int,
        language: str,
        api_key: str,
    ) -> MovieDetail:
        """Fetch a single movie by id."""
        ...


@runtime_checkable
class MovieStoreProtocol(Protocol):
    """Local movie cache.

    Synchronous; implementations raise
    :class:`cinecache.shared.errors.StoreError` on persistence failure.
    ``replace_all`` must be atomic with respect to concurrent readers.
    """

    def get_all(self) -> list[MovieSummary]:
        """Return every cached movie."""
        ...

    def get_by_id(self, movie_id: int) -> MovieSummary | None:
        """Return the cached movie with ``movie_id`` or None."""
        ...

    def search_by_title(self, query: str) -> list[MovieSummary]:
        """Return cached movies whose title contains ``query``."""
        ...

    def replace_all(self, movies: Sequence[MovieSummary]) -> None:
        """Atomically replace the cached set with ``movies``."""
        ...

    def clear(self) -> None:
        """Remove every cached movie."""
        ...


@runtime_checkable
class ConnectivityProbeProtocol(Protocol):
    """Point-in-time network reachability check."""

    def is_network_usable(self) -> bool:
        """Return True if outbound internet access works right now."""
        ...
