"""
Movie Store Constants

Constants for the local SQLite movie store and the fixed messages
reported when the store cannot stand in for the remote service.
"""


class MovieStoreConfig:
    """Local store configuration constants."""

    TABLE_NAME = "movies"
    DEFAULT_DB_PATH = "data/movies.db"
    IN_MEMORY = ":memory:"

    # Trending fetches are truncated to this many entries before caching
    TRENDING_LIMIT = 20

    # Escape character for LIKE patterns
    LIKE_ESCAPE = "\\"


class CacheMessages:
    """Failure reasons reported when the cache fallback yields nothing."""

    NO_CACHED_TRENDING = "No internet connection and no cached data available"
    MOVIE_NOT_CACHED = "No internet connection and movie not cached"
