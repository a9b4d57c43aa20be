"""Offline-first movie repository.

Composes the remote client, the local store and the connectivity probe
into the three catalog reads:

- ``get_trending``: remote first, write-through to the store, store on failure
- ``get_detail``: remote first, cached summary on failure, never cached
- ``search``: store only

Every read terminates in an :data:`~cinecache.shared.result.OperationResult`.
The remote/cache dispatch is split into two pure stages so the state
machine (network ok → remote failed → cache fallback → cache miss) can be
tested without I/O:

1. :func:`choose_route` picks the first source to consult
2. :func:`resolve_fallback` turns the cache lookup (and any remote error)
   into the final result
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Callable, Sequence
from enum import Enum
from typing import Any, TypeVar

from cinecache.shared.constants import CacheMessages, MovieStoreConfig, TMDBDefaults
from cinecache.shared.errors import CineCacheError, ErrorCode, StoreError
from cinecache.shared.logging import (
    log_operation_start,
    log_operation_success,
)
from cinecache.shared.models.movie import MovieDetail, MovieSummary
from cinecache.shared.protocols import (
    ConnectivityProbeProtocol,
    MovieRemoteProtocol,
    MovieStoreProtocol,
)
from cinecache.shared.result import (
    DataSource,
    Failure,
    FetchStage,
    OperationResult,
    Success,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FetchRoute(str, Enum):
    """First source consulted by a read."""

    REMOTE = "remote"
    CACHE = "cache"


def choose_route(network_usable: bool) -> FetchRoute:
    """Return the first source to consult for a remote-backed read."""
    return FetchRoute.REMOTE if network_usable else FetchRoute.CACHE


def resolve_fallback(
    cached: T | None,
    *,
    miss_reason: str,
    remote_error: CineCacheError | None = None,
    write_error: StoreError | None = None,
    store_error: StoreError | None = None,
) -> OperationResult[T]:
    """Resolve the cache fallback stage into a final result.

    A usable cached value always wins over ``remote_error`` and
    ``write_error``. Either of those is reported only when the cache
    yields nothing, and takes precedence over ``miss_reason`` and over
    ``store_error``.

    Args:
        cached: Value read from the store. None or an empty sequence is a miss.
        miss_reason: Reason reported on a miss with no remote error
        remote_error: Error raised by the remote call, if one was attempted
        write_error: Error raised while writing a fetched list to the store
        store_error: Error raised by the store lookup, if it failed

    Returns:
        Success served from the cache, or Failure
    """
    if store_error is None and _is_usable(cached):
        return Success(cached, source=DataSource.CACHE, stage=FetchStage.CACHE_FALLBACK)  # type: ignore[arg-type]

    if store_error is not None:
        error: CineCacheError = remote_error or write_error or store_error
        return Failure(error.message, code=error.code, stage=FetchStage.STORE_FAILED)

    if write_error is not None:
        return Failure(write_error.message, code=write_error.code, stage=FetchStage.STORE_FAILED)

    if remote_error is not None:
        return Failure(remote_error.message, code=remote_error.code, stage=FetchStage.CACHE_MISS)

    return Failure(miss_reason, code=ErrorCode.CACHE_MISS, stage=FetchStage.CACHE_MISS)


def latest_by_id(movies: Sequence[MovieSummary]) -> list[MovieSummary]:
    """Drop repeated ids, keeping each id at its last occurrence.

    Matches what :meth:`MovieStore.replace_all` keeps for the same input.
    """
    last_index = {movie.id: index for index, movie in enumerate(movies)}
    return [movie for index, movie in enumerate(movies) if last_index[movie.id] == index]


def _is_usable(cached: Any) -> bool:
    if cached is None:
        return False
    if isinstance(cached, Sequence):
        return len(cached) > 0
    return True


class MovieRepository:
    """Cache-aside access to the movie catalog.

    Args:
        remote: Remote catalog client
        store: Local movie store
        probe: Connectivity probe, consulted on every remote-backed read
        api_key: TMDB credential attached to every remote call
        language: TMDB language code
        trending_limit: Maximum number of trending entries kept

    Example:
        >>> repository = MovieRepository(TMDBClient(), MovieStore(), ConnectivityProbe(), api_key)
        >>> result = await repository.get_trending()
        >>> if isinstance(result, Success):
        ...     print(len(result.value), result.is_stale)
    """

    def __init__(
        self,
        remote: MovieRemoteProtocol,
        store: MovieStoreProtocol,
        probe: ConnectivityProbeProtocol,
        api_key: str,
        language: str = TMDBDefaults.LANGUAGE,
        trending_limit: int = MovieStoreConfig.TRENDING_LIMIT,
    ) -> None:
        self.remote = remote
        self.store = store
        self.probe = probe
        self.api_key = api_key
        self.language = language
        self.trending_limit = trending_limit

    # ─────────────────────────── trending ───────────────────────────
    async def get_trending(self) -> OperationResult[list[MovieSummary]]:
        """Return the trending list.

        When the network is usable the remote list is truncated to
        ``trending_limit`` entries and atomically replaces the store
        contents before being returned. Otherwise (or if the remote call or
        the store write fails) the whole cached set is returned, uncapped.
        """
        operation = "get_trending"
        start = time.perf_counter()
        log_operation_start(logger, operation)

        remote_error: CineCacheError | None = None
        write_error: StoreError | None = None
        if choose_route(await self._is_network_usable()) is FetchRoute.REMOTE:
            try:
                movies = await self.remote.fetch_trending(self.language, self.api_key)
            except CineCacheError as e:
                remote_error = e
                logger.warning("Trending fetch failed, falling back to cache: %s", e.message)
            else:
                top = latest_by_id(movies[: self.trending_limit])
                try:
                    await self._write_through(top)
                except StoreError as e:
                    write_error = e
                    logger.warning(
                        "Trending write-through failed, falling back to cache: %s",
                        e.message,
                    )
                else:
                    result: OperationResult[list[MovieSummary]] = Success(top)
                    self._log_result(operation, result, start, fetched=len(movies))
                    return result

        cached: list[MovieSummary] | None = None
        store_error: StoreError | None = None
        try:
            cached = await asyncio.to_thread(self.store.get_all)
        except StoreError as e:
            store_error = e

        result = resolve_fallback(
            cached,
            miss_reason=CacheMessages.NO_CACHED_TRENDING,
            remote_error=remote_error,
            write_error=write_error,
            store_error=store_error,
        )
        self._log_result(operation, result, start)
        return result

    async def _write_through(self, movies: list[MovieSummary]) -> None:
        # The write runs to completion even if the caller is cancelled.
        await asyncio.shield(asyncio.to_thread(self.store.replace_all, movies))

    async def trending_stream(self) -> AsyncIterator[OperationResult[list[MovieSummary]]]:
        """Emit the :meth:`get_trending` result once."""
        yield await self.get_trending()

    # ──────────────────────────── detail ────────────────────────────
    async def get_detail(self, movie_id: int) -> OperationResult[MovieDetail]:
        """Return one movie.

        A live remote read when the network is usable; details are never
        cached. Otherwise a detail synthesized from the cached summary,
        which carries only title, overview and poster.
        """
        operation = "get_detail"
        start = time.perf_counter()
        log_operation_start(logger, operation, {"movie_id": movie_id})

        remote_error: CineCacheError | None = None
        if choose_route(await self._is_network_usable()) is FetchRoute.REMOTE:
            try:
                detail = await self.remote.fetch_detail(movie_id, self.language, self.api_key)
            except CineCacheError as e:
                remote_error = e
                logger.warning(
                    "Detail fetch for movie %d failed, falling back to cache: %s",
                    movie_id,
                    e.message,
                )
            else:
                result: OperationResult[MovieDetail] = Success(detail)
                self._log_result(operation, result, start, movie_id=movie_id)
                return result

        cached: MovieDetail | None = None
        store_error: StoreError | None = None
        try:
            summary = await asyncio.to_thread(self.store.get_by_id, movie_id)
        except StoreError as e:
            store_error = e
        else:
            cached = MovieDetail.from_summary(summary) if summary else None

        result = resolve_fallback(
            cached,
            miss_reason=CacheMessages.MOVIE_NOT_CACHED,
            remote_error=remote_error,
            store_error=store_error,
        )
        self._log_result(operation, result, start, movie_id=movie_id)
        return result

    # ──────────────────────────── search ────────────────────────────
    async def search(self, query: str) -> OperationResult[list[MovieSummary]]:
        """Search the cached titles.

        Never calls the remote service and ignores connectivity. A blank
        query returns every cached movie; otherwise titles containing
        ``query`` case-insensitively.
        """
        operation = "search"
        start = time.perf_counter()
        log_operation_start(logger, operation, {"query": query})

        lookup: Callable[[], list[MovieSummary]]
        if query.strip():
            lookup = lambda: self.store.search_by_title(query)  # noqa: E731
        else:
            lookup = self.store.get_all

        try:
            movies = await asyncio.to_thread(lookup)
        except StoreError as e:
            result: OperationResult[list[MovieSummary]] = Failure(
                e.message, code=e.code, stage=FetchStage.STORE_FAILED
            )
        else:
            result = Success(movies, source=DataSource.CACHE, stage=FetchStage.CACHE_FALLBACK)

        self._log_result(operation, result, start)
        return result

    async def search_stream(
        self, query: str
    ) -> AsyncIterator[OperationResult[list[MovieSummary]]]:
        """Emit the :meth:`search` result once."""
        yield await self.search(query)

    # ─────────────────────────── helpers ────────────────────────────
    async def _is_network_usable(self) -> bool:
        # The probe may block on a TCP connect.
        return await asyncio.to_thread(self.probe.is_network_usable)

    def _log_result(
        self,
        operation: str,
        result: OperationResult[Any],
        start: float,
        **context: Any,
    ) -> None:
        duration_ms = round((time.perf_counter() - start) * 1000, 1)

        if isinstance(result, Failure):
            level = logging.ERROR if result.stage is FetchStage.STORE_FAILED else logging.WARNING
            logger.log(
                level,
                "Operation '%s' failed: %s",
                operation,
                result.reason,
                extra={
                    "operation": operation,
                    "error_code": result.code.name if result.code else None,
                    "context": {"stage": result.stage.value, **context},
                },
            )
            return

        result_info: dict[str, Any] = {
            "source": result.source.value,
            "stage": result.stage.value,
        }
        if isinstance(result.value, list):
            result_info["count"] = len(result.value)
        log_operation_success(
            logger,
            operation,
            duration_ms,
            result_info=result_info,
            context=context or None,
        )


__all__ = [
    "FetchRoute",
    "MovieRepository",
    "choose_route",
    "latest_by_id",
    "resolve_fallback",
]
