"""SQLite movie store.

Local cache of the most recent trending fetch. The store is never the
system of record: its rows are created only by :meth:`MovieStore.replace_all`
and removed only by that method or :meth:`MovieStore.clear`.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from cinecache.services.sqlite_cache.migration.manager import MigrationManager
from cinecache.services.sqlite_cache.transaction.manager import TransactionManager
from cinecache.shared.constants import MovieStoreConfig
from cinecache.shared.errors import ErrorCode, create_store_error
from cinecache.shared.logging import log_operation_error, log_operation_success
from cinecache.shared.models.movie import MovieSummary

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, overview, poster_path"


def _escape_like(query: str) -> str:
    """Escape LIKE wildcards so ``query`` matches literally."""
    escape = MovieStoreConfig.LIKE_ESCAPE
    return (
        query.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


def _row_to_summary(row: sqlite3.Row) -> MovieSummary:
    return MovieSummary(
        id=row["id"],
        title=row["title"],
        overview=row["overview"],
        poster_path=row["poster_path"],
    )


class MovieStore:
    """SQLite table of movie summaries keyed by id.

    All access goes through one connection guarded by a re-entrant lock,
    and :meth:`replace_all` runs as a single transaction, so a reader
    on another thread sees either the previous set or the new one.

    Title search is case-insensitive for ASCII letters (SQLite ``LIKE``).

    Attributes:
        db_path: SQLite database path, or ``:memory:``
        conn: SQLite database connection (None after :meth:`close`)

    Example:
        >>> store = MovieStore(Path("movies.db"))
        >>> store.replace_all([MovieSummary(id=5, title="Dune")])
        >>> store.get_by_id(5).title
        'Dune'
        >>> store.close()
    """

    def __init__(self, db_path: Path | str = MovieStoreConfig.DEFAULT_DB_PATH) -> None:
        """Open (and if needed create) the store.

        Args:
            db_path: Path to SQLite database file, or ``:memory:``

        Raises:
            StoreError: If the database cannot be opened or initialized
        """
        self.db_path = str(db_path)
        self.conn: sqlite3.Connection | None = None
        self._lock = threading.RLock()
        self._initialize_db()

    @property
    def is_in_memory(self) -> bool:
        return self.db_path == MovieStoreConfig.IN_MEMORY

    def _initialize_db(self) -> None:
        """Connect and create the schema.

        Raises:
            StoreError: If database connection or schema creation fails
        """
        try:
            if not self.is_in_memory:
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

            self.conn = sqlite3.connect(
                self.db_path,
                check_same_thread=False,  # access is serialized by self._lock
                isolation_level=None,  # autocommit; transactions are explicit
            )
            self.conn.row_factory = sqlite3.Row

            if not self.is_in_memory:
                self.conn.execute("PRAGMA journal_mode=WAL")
                self.conn.execute("PRAGMA synchronous=NORMAL")

            MigrationManager(self.conn).create_tables()
            self._transactions = TransactionManager(self.conn)

            log_operation_success(
                logger=logger,
                operation="initialize_db",
                duration_ms=0,
                context={"db_path": self.db_path},
            )

        except (sqlite3.Error, OSError) as e:
            error = create_store_error(
                f"Failed to initialize movie store: {e!s}",
                code=ErrorCode.CACHE_INIT_FAILED,
                operation="initialize_db",
                additional_data={"db_path": self.db_path},
                original_error=e,
            )
            log_operation_error(logger, error, operation="initialize_db")
            raise error from e

    @contextmanager
    def _operation(
        self,
        operation: str,
        code: ErrorCode = ErrorCode.CACHE_READ_FAILED,
    ) -> Iterator[sqlite3.Connection]:
        """Hold the store lock and translate sqlite errors into StoreError."""
        with self._lock:
            if self.conn is None:
                error = create_store_error(
                    "Movie store is closed",
                    code=code,
                    operation=operation,
                )
                log_operation_error(logger, error, operation=operation)
                raise error

            try:
                yield self.conn
            except sqlite3.Error as e:
                error = create_store_error(
                    f"Movie store {operation} failed: {e!s}",
                    code=code,
                    operation=operation,
                    additional_data={"db_path": self.db_path},
                    original_error=e,
                )
                log_operation_error(logger, error, operation=operation)
                raise error from e

    # ───────────────────────────── readers ──────────────────────────
    def get_all(self) -> list[MovieSummary]:
        """Return every cached movie in the order it was stored.

        Raises:
            StoreError: If the query fails
        """
        with self._operation("get_all") as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM movies ORDER BY position"
            ).fetchall()
        return [_row_to_summary(row) for row in rows]

    def get_by_id(self, movie_id: int) -> MovieSummary | None:
        """Return the cached movie with ``movie_id`` or None.

        Raises:
            StoreError: If the query fails
        """
        with self._operation("get_by_id") as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM movies WHERE id = ?",
                (movie_id,),
            ).fetchone()
        return _row_to_summary(row) if row else None

    def search_by_title(self, query: str) -> list[MovieSummary]:
        """Return cached movies whose title contains ``query``.

        Matching is case-insensitive for ASCII letters; ``%``, ``_`` and
        ``\\`` in ``query`` are matched literally.

        Raises:
            StoreError: If the query fails
        """
        pattern = f"%{_escape_like(query)}%"
        with self._operation("search_by_title") as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM movies "
                "WHERE title LIKE ? ESCAPE ? ORDER BY position",
                (pattern, MovieStoreConfig.LIKE_ESCAPE),
            ).fetchall()
        return [_row_to_summary(row) for row in rows]

    def count(self) -> int:
        """Return the number of cached movies."""
        with self._operation("count") as conn:
            row = conn.execute("SELECT COUNT(*) FROM movies").fetchone()
        return int(row[0])

    # ───────────────────────────── writers ──────────────────────────
    def replace_all(self, movies: Sequence[MovieSummary]) -> None:
        """Atomically replace the cached set with ``movies``.

        Clears the table and inserts ``movies`` in one transaction. A
        duplicate id keeps the last occurrence.

        Raises:
            StoreError: If the write fails; the previous set is kept
        """
        rows: list[tuple[Any, ...]] = [
            (movie.id, movie.title, movie.overview, movie.poster_path, position)
            for position, movie in enumerate(movies)
        ]
        with self._operation("replace_all", ErrorCode.CACHE_WRITE_FAILED) as conn:
            with self._transactions:
                conn.execute("DELETE FROM movies")
                conn.executemany(
                    "INSERT OR REPLACE INTO movies "
                    "(id, title, overview, poster_path, position) "
                    "VALUES (?, ?, ?, ?, ?)",
                    rows,
                )

        log_operation_success(
            logger=logger,
            operation="replace_all",
            duration_ms=0,
            result_info={"count": len(rows)},
        )

    def clear(self) -> None:
        """Remove every cached movie.

        Raises:
            StoreError: If the delete fails
        """
        with self._operation("clear", ErrorCode.CACHE_WRITE_FAILED) as conn:
            conn.execute("DELETE FROM movies")
        logger.info("Cleared movie store: %s", self.db_path)

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self.conn:
                self.conn.close()
                self.conn = None
                logger.debug("Closed movie store connection: %s", self.db_path)
