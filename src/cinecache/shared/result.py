"""Operation result types.

Every public repository read returns an :data:`OperationResult`: either a
:class:`Success` carrying the value or a :class:`Failure` carrying a
human-readable reason. There is no third, implicit fault channel.

Example:
    >>> result = await repository.get_detail(5)
    >>> if isinstance(result, Success):
    ...     print(result.value.title, result.source)
    ... else:
    ...     print(result.reason)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from cinecache.shared.errors import ErrorCode

T = TypeVar("T")


class DataSource(str, Enum):
    """Where a successful value came from.

    ``CACHE`` values may be stale relative to the remote catalog.
    """

    REMOTE = "remote"
    CACHE = "cache"


class FetchStage(str, Enum):
    """Terminal stage of the remote/cache decision pipeline."""

    REMOTE = "remote"  # network usable, remote call succeeded
    CACHE_FALLBACK = "cache_fallback"  # served from the store
    CACHE_MISS = "cache_miss"  # store had nothing usable
    STORE_FAILED = "store_failed"  # store raised


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome."""

    value: T
    source: DataSource = DataSource.REMOTE
    stage: FetchStage = FetchStage.REMOTE

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_stale(self) -> bool:
        """True when the value was served from the local cache."""
        return self.source is DataSource.CACHE


@dataclass(frozen=True)
class Failure:
    """Failed outcome with the reason shown to the caller."""

    reason: str
    code: ErrorCode | None = None
    stage: FetchStage = FetchStage.CACHE_MISS

    @property
    def is_success(self) -> bool:
        return False


OperationResult = Union[Success[T], Failure]


__all__ = [
    "DataSource",
    "Failure",
    "FetchStage",
    "OperationResult",
    "Success",
]
