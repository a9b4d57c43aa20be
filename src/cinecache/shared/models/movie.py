"""Movie record models.

These dataclasses describe the TMDB payloads the system consumes and the
rows kept in the local store. They live in ``shared`` so the store, the
remote client and the repository can all use them without importing one
another.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cinecache.shared.types.base import BaseDataclass


@dataclass(frozen=True)
class MovieSummary(BaseDataclass):
    """One catalog entry, as listed by the trending endpoint.

    Also the only record persisted locally.
    """

    id: int
    title: str
    overview: str = ""
    poster_path: str | None = None


@dataclass(frozen=True)
class MovieDetail(BaseDataclass):
    """Single movie as returned by the details endpoint.

    Carries the same fields as :class:`MovieSummary`; details are never
    persisted.
    """

    id: int
    title: str
    overview: str = ""
    poster_path: str | None = None

    @classmethod
    def from_summary(cls, summary: MovieSummary) -> MovieDetail:
        """Build a best-effort detail from a cached summary."""
        return cls(
            id=summary.id,
            title=summary.title,
            overview=summary.overview,
            poster_path=summary.poster_path,
        )


@dataclass(frozen=True)
class TrendingResponse(BaseDataclass):
    """List envelope of the ``trending/movie/week`` endpoint."""

    page: int = 1
    total_pages: int = 1
    total_results: int = 0
    results: list[MovieSummary] = field(default_factory=list)


__all__ = [
    "MovieDetail",
    "MovieSummary",
    "TrendingResponse",
]
