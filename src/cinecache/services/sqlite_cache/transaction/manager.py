"""Transaction manager for the movie store."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    import sqlite3

logger = logging.getLogger(__name__)


class TransactionManager:
    """Explicit transactions on an autocommit connection.

    ``BEGIN IMMEDIATE`` takes the write lock up front so a replace never
    interleaves with another writer.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Initialize transaction manager.

        Args:
            conn: SQLite database connection opened with ``isolation_level=None``
        """
        self.conn = conn

    def __enter__(self) -> Self:
        """Enter context manager - begin transaction."""
        self.begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit context manager - commit or rollback."""
        if exc_type is None:
            self.commit()
        else:
            logger.debug("Rolling back transaction after %s", exc_type.__name__)
            self.rollback()

    def begin(self) -> None:
        """Begin a write transaction."""
        self.conn.execute("BEGIN IMMEDIATE")

    def commit(self) -> None:
        """Commit the current transaction."""
        self.conn.execute("COMMIT")

    def rollback(self) -> None:
        """Rollback the current transaction."""
        self.conn.execute("ROLLBACK")
