"""Tests for MovieStore.

Tests follow the Failure-First pattern:
1. Test failure cases first
2. Test edge cases
3. Test happy path
"""

from __future__ import annotations

import sqlite3
import threading
from pathlib import Path

import pytest

from cinecache.services.sqlite_cache import MovieStore
from cinecache.services.sqlite_cache.migration.manager import SCHEMA_VERSION, MigrationManager
from cinecache.shared.errors import ErrorCode, StoreError
from cinecache.shared.models.movie import MovieSummary
from tests.test_helpers import make_movies


class TestMovieStoreInitialization:
    """Test MovieStore initialization."""

    def test_init_fails_when_parent_is_a_file(self, tmp_path: Path) -> None:
        """A path that cannot be created raises StoreError(CACHE_INIT_FAILED)."""
        # Given
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        # When & Then
        with pytest.raises(StoreError) as exc_info:
            MovieStore(blocker / "movies.db")

        assert exc_info.value.code == ErrorCode.CACHE_INIT_FAILED

    def test_init_creates_db_file_and_parent_directory(self, tmp_path: Path) -> None:
        # Given
        db_path = tmp_path / "nested" / "dir" / "movies.db"

        # When
        store = MovieStore(db_path)

        # Then
        assert db_path.exists()
        assert store.conn is not None
        store.close()

    def test_init_with_existing_db_keeps_rows(self, tmp_path: Path) -> None:
        # Given
        db_path = tmp_path / "movies.db"
        first = MovieStore(db_path)
        first.replace_all(make_movies(3))
        first.close()

        # When
        second = MovieStore(db_path)

        # Then
        assert [movie.id for movie in second.get_all()] == [1, 2, 3]
        second.close()

    def test_schema_version_recorded(self, store: MovieStore) -> None:
        # When
        version = MigrationManager(store.conn).get_current_version()

        # Then
        assert version == SCHEMA_VERSION

    def test_file_database_uses_wal(self, file_store: MovieStore) -> None:
        # When
        mode = file_store.conn.execute("PRAGMA journal_mode").fetchone()[0]

        # Then
        assert mode.lower() == "wal"


class TestMovieStoreClosed:
    """Operations on a closed store."""

    def test_read_after_close_raises_store_error(self, store: MovieStore) -> None:
        # Given
        store.close()

        # When & Then
        with pytest.raises(StoreError) as exc_info:
            store.get_all()

        assert exc_info.value.code == ErrorCode.CACHE_READ_FAILED

    def test_write_after_close_raises_store_error(self, store: MovieStore) -> None:
        # Given
        store.close()

        # When & Then
        with pytest.raises(StoreError) as exc_info:
            store.replace_all(make_movies(1))

        assert exc_info.value.code == ErrorCode.CACHE_WRITE_FAILED

    def test_close_is_idempotent(self, store: MovieStore) -> None:
        store.close()
        store.close()

        assert store.conn is None


class TestMovieStoreReplaceAll:
    """Test the atomic full replace."""

    def test_failed_replace_keeps_previous_set(self, store: MovieStore) -> None:
        """A row violating the schema rolls back the whole replace."""
        # Given
        store.replace_all(make_movies(3))
        broken = [*make_movies(2, start=10), MovieSummary(id=12, title=None)]  # type: ignore[arg-type]

        # When
        with pytest.raises(StoreError) as exc_info:
            store.replace_all(broken)

        # Then
        assert exc_info.value.code == ErrorCode.CACHE_WRITE_FAILED
        assert [movie.id for movie in store.get_all()] == [1, 2, 3]

    def test_replace_with_empty_sequence_clears(self, store: MovieStore) -> None:
        # Given
        store.replace_all(make_movies(3))

        # When
        store.replace_all([])

        # Then
        assert store.get_all() == []

    def test_duplicate_ids_keep_one_row(self, store: MovieStore) -> None:
        # Given
        movies = [
            MovieSummary(id=1, title="Old"),
            MovieSummary(id=1, title="New"),
        ]

        # When
        store.replace_all(movies)

        # Then
        assert store.count() == 1
        assert store.get_by_id(1).title == "New"

    def test_replace_discards_previous_generation(self, store: MovieStore) -> None:
        # Given
        store.replace_all(make_movies(5, start=1))

        # When
        store.replace_all(make_movies(3, start=4))

        # Then
        assert {movie.id for movie in store.get_all()} == {4, 5, 6}

    def test_get_all_preserves_insertion_order(self, store: MovieStore) -> None:
        # Given
        movies = [
            MovieSummary(id=30, title="C"),
            MovieSummary(id=10, title="A"),
            MovieSummary(id=20, title="B"),
        ]

        # When
        store.replace_all(movies)

        # Then
        assert store.get_all() == movies

    def test_round_trips_all_fields(self, store: MovieStore) -> None:
        # Given
        movie = MovieSummary(id=5, title="Dune", overview="Spice.", poster_path="/dune.jpg")
        no_poster = MovieSummary(id=6, title="Arrival", overview="", poster_path=None)

        # When
        store.replace_all([movie, no_poster])

        # Then
        assert store.get_by_id(5) == movie
        assert store.get_by_id(6) == no_poster

    def test_clear_removes_everything(self, store: MovieStore) -> None:
        # Given
        store.replace_all(make_movies(4))

        # When
        store.clear()

        # Then
        assert store.count() == 0
        assert store.get_all() == []


class TestMovieStoreLookup:
    """Test id lookup and title search."""

    def test_get_by_id_missing_returns_none(self, store: MovieStore) -> None:
        store.replace_all(make_movies(2))

        assert store.get_by_id(99) is None

    @pytest.mark.parametrize("query", ["dune", "DUNE", "Dun", "une"])
    def test_search_is_case_insensitive_substring(self, store: MovieStore, query: str) -> None:
        # Given
        store.replace_all(
            [
                MovieSummary(id=1, title="Dune"),
                MovieSummary(id=2, title="Dune: Part Two"),
                MovieSummary(id=3, title="Arrival"),
            ]
        )

        # When
        results = store.search_by_title(query)

        # Then
        assert [movie.id for movie in results] == [1, 2]

    @pytest.mark.parametrize(
        ("query", "expected_ids"),
        [
            ("100%", [1]),
            ("_", [2]),
            ("a\\b", [3]),
            ("%", [1]),
        ],
    )
    def test_search_treats_wildcards_literally(
        self,
        store: MovieStore,
        query: str,
        expected_ids: list[int],
    ) -> None:
        # Given
        store.replace_all(
            [
                MovieSummary(id=1, title="100% Wolf"),
                MovieSummary(id=2, title="snake_case"),
                MovieSummary(id=3, title="a\\b"),
                MovieSummary(id=4, title="1000 Wolves"),
            ]
        )

        # When
        results = store.search_by_title(query)

        # Then
        assert [movie.id for movie in results] == expected_ids

    def test_search_without_match_returns_empty(self, store: MovieStore) -> None:
        store.replace_all(make_movies(3))

        assert store.search_by_title("zzz") == []

    def test_sqlite_error_is_wrapped(self, store: MovieStore) -> None:
        """Low-level sqlite errors surface as StoreError."""
        # Given
        store.conn.execute("DROP TABLE movies")

        # When & Then
        with pytest.raises(StoreError) as exc_info:
            store.search_by_title("x")

        assert isinstance(exc_info.value.original_error, sqlite3.Error)


class TestMovieStoreConcurrency:
    """Readers never observe a partially replaced table."""

    @pytest.mark.slow
    def test_concurrent_reader_sees_whole_generations(self, file_store: MovieStore) -> None:
        # Given
        generation_a = make_movies(20, start=1)
        generation_b = make_movies(20, start=101)
        ids_a = {movie.id for movie in generation_a}
        ids_b = {movie.id for movie in generation_b}
        file_store.replace_all(generation_a)

        observed: list[set[int]] = []
        stop = threading.Event()

        def reader() -> None:
            while not stop.is_set():
                observed.append({movie.id for movie in file_store.get_all()})

        thread = threading.Thread(target=reader)

        # When
        thread.start()
        for i in range(50):
            file_store.replace_all(generation_b if i % 2 == 0 else generation_a)
        stop.set()
        thread.join()

        # Then
        assert observed
        assert all(ids in (ids_a, ids_b) for ids in observed)
