"""Transaction management for the movie store."""

from cinecache.services.sqlite_cache.transaction.manager import TransactionManager

__all__ = ["TransactionManager"]
