"""
CLI Constants

Command names, help text and exit codes for the ``cinecache`` command.
"""

from __future__ import annotations

from typing import Literal


class CLICommands:
    """CLI command names."""

    TRENDING = "trending"
    DETAIL = "detail"
    SEARCH = "search"
    CLEAR_CACHE = "clear-cache"


class CLIHelp:
    """CLI help text and descriptions."""

    VERSION_TEXT = "CineCache CLI v{version}"

    APP_NAME = "cinecache"
    APP_DESCRIPTION = "CineCache - Offline-first movie catalog backed by TMDB"
    APP_STYLE: Literal["rich"] = "rich"

    TRENDING_HELP = "Show this week's trending movies"
    DETAIL_HELP = "Show a single movie"
    DETAIL_ID_HELP = "TMDB movie id"
    SEARCH_HELP = "Search cached movie titles"
    SEARCH_QUERY_HELP = "Case-insensitive title substring; empty lists every cached movie"
    CLEAR_CACHE_HELP = "Remove every cached movie"

    STALE_NOTICE = "Served from local cache; may be out of date."
    CACHE_CLEARED = "Cleared {count} cached movie(s)."


class CLIDefaults:
    """CLI default values."""

    VERSION = "0.1.0"

    EXIT_SUCCESS = 0
    EXIT_ERROR = 1

    TABLE_OVERVIEW_WIDTH = 60


__all__ = [
    "CLICommands",
    "CLIDefaults",
    "CLIHelp",
]
