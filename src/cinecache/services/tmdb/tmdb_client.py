"""TMDB API client.

Async client for the two TMDB endpoints the catalog needs: the weekly
trending list and single-movie details. Every request carries the
language and api key passed by the caller and a bounded timeout.

The client performs no retries and keeps no state besides its pooled
aiohttp session; every failure is converted into a
:class:`~cinecache.shared.errors.RemoteError`.
"""

from __future__ import annotations

import asyncio
import logging
import time
from types import TracebackType
from typing import Any

import aiohttp

from cinecache.shared.constants import (
    HTTPHeaders,
    HTTPStatusCodes,
    TMDBDefaults,
    TMDBEndpoints,
    TMDBErrorMessages,
    TMDBOperationNames,
)
from cinecache.shared.errors import (
    ErrorCode,
    ErrorContext,
    RemoteError,
    create_remote_error,
)
from cinecache.shared.logging import (
    log_api_call,
    log_operation_error,
    log_operation_success,
)
from cinecache.shared.models.movie import MovieDetail, MovieSummary, TrendingResponse
from cinecache.shared.utils.dataclass_serialization import from_dict

logger = logging.getLogger(__name__)


class TMDBClient:
    """TMDB v3 API client.

    Args:
        base_url: TMDB API base URL
        timeout: Total request timeout in seconds
        session: Optional externally managed aiohttp session. When omitted
            the client creates one lazily and closes it in :meth:`close`.

    Example:
        >>> async with TMDBClient(timeout=5) as client:
        ...     movies = await client.fetch_trending("en-US", api_key)
    """

    def __init__(
        self,
        base_url: str = TMDBDefaults.BASE_URL,
        timeout: float = TMDBDefaults.TIMEOUT,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> TMDBClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug("Closed TMDB HTTP session")
        if self._owns_session:
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={
                    HTTPHeaders.USER_AGENT: TMDBDefaults.USER_AGENT,
                    HTTPHeaders.ACCEPT: TMDBDefaults.ACCEPT_JSON,
                },
            )
            self._owns_session = True
        return self._session

    async def fetch_trending(self, language: str, api_key: str) -> list[MovieSummary]:
        """Fetch the weekly trending movie list.

        Args:
            language: TMDB language code, e.g. ``en-US``
            api_key: TMDB api key

        Returns:
            Summaries in the order TMDB returned them

        Raises:
            RemoteError: On transport failure, non-2xx status, timeout or
                malformed payload
        """
        operation = TMDBOperationNames.FETCH_TRENDING
        payload = await self._get_json(
            TMDBEndpoints.TRENDING_MOVIES_WEEK,
            language=language,
            api_key=api_key,
            operation=operation,
        )
        response: TrendingResponse = self._decode(TrendingResponse, payload, operation)

        log_operation_success(
            logger=logger,
            operation=operation,
            duration_ms=0,
            result_info={"count": len(response.results)},
        )
        return list(response.results)

    async def fetch_detail(
        self,
        movie_id: int,
        language: str,
        api_key: str,
    ) -> MovieDetail:
        """Fetch a single movie by id.

        Args:
            movie_id: TMDB movie id
            language: TMDB language code
            api_key: TMDB api key

        Returns:
            The movie detail

        Raises:
            RemoteError: On transport failure, non-2xx status (including 404),
                timeout or malformed payload
        """
        operation = TMDBOperationNames.FETCH_DETAIL
        payload = await self._get_json(
            TMDBEndpoints.MOVIE_DETAILS.format(movie_id=movie_id),
            language=language,
            api_key=api_key,
            operation=operation,
            movie_id=movie_id,
        )
        detail: MovieDetail = self._decode(MovieDetail, payload, operation)

        log_operation_success(
            logger=logger,
            operation=operation,
            duration_ms=0,
            context={"movie_id": movie_id},
        )
        return detail

    async def _get_json(
        self,
        path: str,
        *,
        language: str,
        api_key: str,
        operation: str,
        movie_id: int | None = None,
    ) -> Any:
        """Issue a GET request and return the decoded JSON body.

        Raises:
            RemoteError: If the request fails for any reason
        """
        url = f"{self.base_url}/{path}"
        params = {
            TMDBEndpoints.PARAM_LANGUAGE: language,
            TMDBEndpoints.PARAM_API_KEY: api_key,
        }
        additional_data: dict[str, Any] = {"endpoint": path}
        if movie_id is not None:
            additional_data["movie_id"] = movie_id

        session = self._get_session()
        start = time.perf_counter()

        try:
            async with session.get(url, params=params, timeout=self.timeout) as response:
                duration_ms = (time.perf_counter() - start) * 1000
                log_api_call(
                    logger,
                    endpoint=path,
                    status_code=response.status,
                    duration_ms=round(duration_ms, 1),
                )

                if not HTTPStatusCodes.is_success(response.status):
                    code, message = self._convert_status(response.status)
                    additional_data["status_code"] = response.status
                    raise create_remote_error(
                        message,
                        code=code,
                        operation=operation,
                        additional_data=additional_data,
                    )

                return await response.json(content_type=None)

        except asyncio.TimeoutError as e:
            error = create_remote_error(
                TMDBErrorMessages.TIMEOUT,
                code=ErrorCode.TMDB_API_TIMEOUT,
                operation=operation,
                additional_data=additional_data,
                original_error=e,
            )
        except aiohttp.ClientError as e:
            error = create_remote_error(
                TMDBErrorMessages.CONNECTION_FAILED.format(error=e),
                code=ErrorCode.TMDB_API_CONNECTION_ERROR,
                operation=operation,
                additional_data=additional_data,
                original_error=e,
            )
        except ValueError as e:
            error = create_remote_error(
                TMDBErrorMessages.INVALID_RESPONSE.format(error=e),
                code=ErrorCode.TMDB_API_INVALID_RESPONSE,
                operation=operation,
                additional_data=additional_data,
                original_error=e,
            )
        except RemoteError as e:
            log_operation_error(logger, e, operation=operation, level=logging.WARNING)
            raise

        log_operation_error(logger, error, operation=operation, level=logging.WARNING)
        raise error from error.original_error

    def _decode(self, cls: type, payload: Any, operation: str) -> Any:
        """Build ``cls`` from a JSON payload.

        Raises:
            RemoteError: If required fields are missing or mistyped
        """
        try:
            return from_dict(cls, payload)
        except (KeyError, TypeError) as e:
            error = RemoteError(
                code=ErrorCode.TMDB_API_INVALID_RESPONSE,
                message=TMDBErrorMessages.INVALID_RESPONSE.format(error=e),
                context=ErrorContext(
                    operation=operation,
                    additional_data={"model": cls.__name__},
                ),
                original_error=e,
            )
            log_operation_error(logger, error, operation=operation, level=logging.WARNING)
            raise error from e

    @staticmethod
    def _convert_status(status_code: int) -> tuple[ErrorCode, str]:
        """Map a non-success HTTP status to an ErrorCode and message."""
        if status_code == HTTPStatusCodes.UNAUTHORIZED:
            return (
                ErrorCode.TMDB_API_AUTHENTICATION_ERROR,
                TMDBErrorMessages.AUTHENTICATION_FAILED,
            )
        if status_code == HTTPStatusCodes.FORBIDDEN:
            return (
                ErrorCode.TMDB_API_AUTHENTICATION_ERROR,
                TMDBErrorMessages.ACCESS_FORBIDDEN,
            )
        if status_code == HTTPStatusCodes.NOT_FOUND:
            return ErrorCode.TMDB_API_MEDIA_NOT_FOUND, TMDBErrorMessages.NOT_FOUND
        if status_code == HTTPStatusCodes.TOO_MANY_REQUESTS:
            return (
                ErrorCode.TMDB_API_RATE_LIMIT_EXCEEDED,
                TMDBErrorMessages.RATE_LIMIT_EXCEEDED,
            )
        if HTTPStatusCodes.is_client_error(status_code):
            return (
                ErrorCode.TMDB_API_REQUEST_FAILED,
                TMDBErrorMessages.CLIENT_ERROR.format(status_code=status_code),
            )
        if HTTPStatusCodes.is_server_error(status_code):
            return (
                ErrorCode.TMDB_API_SERVER_ERROR,
                TMDBErrorMessages.SERVER_ERROR.format(status_code=status_code),
            )
        return (
            ErrorCode.TMDB_API_REQUEST_FAILED,
            TMDBErrorMessages.REQUEST_FAILED.format(status_code=status_code),
        )
