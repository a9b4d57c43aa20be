"""Shared data models for CineCache."""

from .movie import MovieDetail, MovieSummary, TrendingResponse

__all__ = [
    "MovieDetail",
    "MovieSummary",
    "TrendingResponse",
]
