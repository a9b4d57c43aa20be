"""Schema manager for the movie store.

Creates the single ``movies`` table on first open. There is no upgrade
path between schema versions; the store is a disposable cache.
"""

from __future__ import annotations

import logging
import sqlite3

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class MigrationManager:
    """Database schema manager."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Initialize schema manager.

        Args:
            conn: SQLite database connection
        """
        self.conn = conn

    def get_current_version(self) -> int:
        """Get current schema version from database (0 if not set)."""
        cursor = self.conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
        )
        if cursor.fetchone() is None:
            return 0

        cursor = self.conn.execute("SELECT MAX(version) FROM schema_version")
        row = cursor.fetchone()
        return row[0] if row and row[0] is not None else 0

    def create_tables(self) -> None:
        """Create database schema (v1) if missing."""
        schema_sql = """
        CREATE TABLE IF NOT EXISTS movies (
            id INTEGER PRIMARY KEY,
            title TEXT NOT NULL,
            overview TEXT NOT NULL DEFAULT '',
            poster_path TEXT,

            -- Order of the entry in the fetch that stored it
            position INTEGER NOT NULL
        );

        CREATE INDEX IF NOT EXISTS idx_movies_position ON movies(position);

        CREATE TABLE IF NOT EXISTS schema_version (
            version INTEGER PRIMARY KEY,
            applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP NOT NULL
        );
        """

        self.conn.executescript(schema_sql)

        if self.get_current_version() < SCHEMA_VERSION:
            self.conn.execute(
                "INSERT OR REPLACE INTO schema_version (version) VALUES (?)",
                (SCHEMA_VERSION,),
            )
            logger.info("Created movie store schema (v%d)", SCHEMA_VERSION)
