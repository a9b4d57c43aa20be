"""CineCache Error Handling Module

This module defines the error handling system for CineCache, providing
structured error classes with context information and readable messages.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved

The repository layer never lets these escape to its callers; they are
converted into ``Failure`` results at the orchestration boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]

# Keys that are never exported by safe_dict
SAFE_DICT_MASK_KEYS: tuple[str, ...] = ("api_key",)


class ErrorCode(str, Enum):
    """Error codes for CineCache.

    This enum serves as the single source of truth for all error codes
    used throughout the application.
    """

    # TMDB API errors
    TMDB_API_CONNECTION_ERROR = "TMDB_API_CONNECTION_ERROR"
    TMDB_API_AUTHENTICATION_ERROR = "TMDB_API_AUTHENTICATION_ERROR"
    TMDB_API_RATE_LIMIT_EXCEEDED = "TMDB_API_RATE_LIMIT_EXCEEDED"
    TMDB_API_REQUEST_FAILED = "TMDB_API_REQUEST_FAILED"
    TMDB_API_TIMEOUT = "TMDB_API_TIMEOUT"
    TMDB_API_SERVER_ERROR = "TMDB_API_SERVER_ERROR"
    TMDB_API_INVALID_RESPONSE = "TMDB_API_INVALID_RESPONSE"
    TMDB_API_MEDIA_NOT_FOUND = "TMDB_API_MEDIA_NOT_FOUND"

    # Local store errors
    CACHE_READ_FAILED = "CACHE_READ_FAILED"
    CACHE_WRITE_FAILED = "CACHE_WRITE_FAILED"
    CACHE_INIT_FAILED = "CACHE_INIT_FAILED"
    CACHE_MISS = "CACHE_MISS"

    # Configuration errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    MISSING_CONFIG = "MISSING_CONFIG"
    INVALID_CONFIG = "INVALID_CONFIG"

    # CLI
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"


def _validate_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Validate that additional_data holds primitive values only.

    Args:
        value: Input dictionary or None

    Returns:
        Copy of the dictionary, or None

    Raises:
        TypeError: If value is not a dict or holds a non-primitive value
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    validated: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if not isinstance(val, (str, int, float, bool)):
            error_msg = (
                f"additional_data[{key!r}] must be str, int, float or bool, "
                f"got {type(val).__name__}"
            )
            raise TypeError(error_msg)
        validated[key] = val

    return validated


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data to keep log serialization safe.

    Attributes:
        operation: Optional operation name that caused the error
        additional_data: Optional dict with primitive values only
    """

    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        """Validate additional_data and store a private copy."""
        if self.additional_data is not None:
            validated = _validate_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", validated)

    def safe_dict(self, *, mask_keys: tuple[str, ...] | None = None) -> dict[str, Any]:
        """Export context as dict with sensitive keys removed.

        Args:
            mask_keys: Keys to drop from additional_data. Defaults to
                SAFE_DICT_MASK_KEYS.

        Returns:
            Dictionary with a guaranteed ``additional_data`` key.

        Example:
            >>> ErrorContext(operation="fetch", additional_data={"api_key": "x"}).safe_dict()
            {'operation': 'fetch', 'additional_data': {}}
        """
        if mask_keys is None:
            mask_keys = SAFE_DICT_MASK_KEYS

        data: dict[str, Any] = {}
        if self.operation is not None:
            data["operation"] = self.operation

        extra = self.additional_data or {}
        data["additional_data"] = {k: v for k, v in extra.items() if k not in mask_keys}
        return data


class CineCacheError(Exception):
    """Base exception class for all CineCache errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize CineCacheError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class InfrastructureError(CineCacheError):
    """Infrastructure-related errors.

    Raised when interacting with external systems like the network,
    the TMDB API or the SQLite database.
    """


class RemoteError(InfrastructureError):
    """Transport, status or payload failure from the TMDB API.

    Examples:
    - Connection refused / DNS failure
    - Request timeout
    - Non-2xx response status
    - Malformed JSON or missing fields
    """


class StoreError(InfrastructureError):
    """SQLite failure while reading or writing the local movie store."""


class ApplicationError(CineCacheError):
    """Application-level errors (configuration, command handling)."""


class SecurityError(CineCacheError):
    """Missing or invalid credentials."""


# Convenience functions for common error scenarios
def create_remote_error(
    message: str,
    code: ErrorCode = ErrorCode.TMDB_API_REQUEST_FAILED,
    operation: str | None = None,
    additional_data: dict[str, Any] | None = None,
    original_error: Exception | None = None,
) -> RemoteError:
    """Create a remote (TMDB) error with context."""
    context = ErrorContext(operation=operation, additional_data=additional_data)
    return RemoteError(code, message, context, original_error)


def create_store_error(
    message: str,
    code: ErrorCode = ErrorCode.CACHE_READ_FAILED,
    operation: str | None = None,
    additional_data: dict[str, Any] | None = None,
    original_error: Exception | None = None,
) -> StoreError:
    """Create a local store error with context."""
    context = ErrorContext(operation=operation, additional_data=additional_data)
    return StoreError(code, message, context, original_error)


def create_config_error(
    message: str,
    config_key: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> ApplicationError:
    """Create a configuration error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"config_key": config_key} if config_key else None
    )
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return ApplicationError(
        ErrorCode.CONFIGURATION_ERROR,
        message,
        context,
        original_error,
    )
