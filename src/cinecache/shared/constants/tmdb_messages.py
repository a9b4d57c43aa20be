"""
TMDB API Message and Endpoint Constants
"""


class TMDBEndpoints:
    """TMDB v3 endpoint paths, relative to the base URL."""

    TRENDING_MOVIES_WEEK = "trending/movie/week"
    MOVIE_DETAILS = "movie/{movie_id}"

    # Query parameter names
    PARAM_LANGUAGE = "language"
    PARAM_API_KEY = "api_key"

    # List envelope key
    RESULTS = "results"


class TMDBErrorMessages:
    """TMDB API error message constants."""

    AUTHENTICATION_FAILED = "TMDB API authentication failed"
    ACCESS_FORBIDDEN = "TMDB API access forbidden"
    RATE_LIMIT_EXCEEDED = "TMDB API rate limit exceeded"
    NOT_FOUND = "TMDB API resource not found"
    REQUEST_FAILED = "TMDB API request failed: {status_code}"
    CLIENT_ERROR = "TMDB API client error: {status_code}"
    SERVER_ERROR = "TMDB API server error: {status_code}"
    TIMEOUT = "TMDB API request timeout"
    CONNECTION_FAILED = "TMDB API connection failed: {error}"
    INVALID_RESPONSE = "TMDB API returned a malformed payload: {error}"


class TMDBOperationNames:
    """TMDB operation name constants for logging."""

    FETCH_TRENDING = "fetch_trending"
    FETCH_DETAIL = "fetch_detail"


__all__ = [
    "TMDBEndpoints",
    "TMDBErrorMessages",
    "TMDBOperationNames",
]
