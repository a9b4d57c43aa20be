"""
Pytest configuration and shared fixtures for CineCache tests.

This module provides common fixtures that can be used across all test
modules in the project.
"""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from cinecache.config.loader import SettingsLoader
from cinecache.services.sqlite_cache import MovieStore
from tests.test_helpers import FakeProbe

# Never let a developer's shell leak into config tests
for _var in list(os.environ):
    if _var.startswith("CINECACHE_") or _var == "TMDB_API_KEY":
        os.environ.pop(_var)


@pytest.fixture
def store() -> Generator[MovieStore, None, None]:
    """In-memory movie store."""
    movie_store = MovieStore(":memory:")
    yield movie_store
    movie_store.close()


@pytest.fixture
def file_store(tmp_path: Path) -> Generator[MovieStore, None, None]:
    """File-backed movie store in a temporary directory."""
    movie_store = MovieStore(tmp_path / "movies.db")
    yield movie_store
    movie_store.close()


@pytest.fixture
def online_probe() -> FakeProbe:
    return FakeProbe(usable=True)


@pytest.fixture
def offline_probe() -> FakeProbe:
    return FakeProbe(usable=False)


@pytest.fixture(autouse=True)
def reset_settings_singleton() -> Generator[None, None, None]:
    """Drop the cached Settings instance around every test."""
    SettingsLoader().reset()
    yield
    SettingsLoader().reset()
