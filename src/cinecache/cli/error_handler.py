"""
CLI Error Handling Utilities

Consistent reporting of exceptions that escape a command: configuration
problems, a store that cannot be opened, or unexpected bugs. Repository
failures are not exceptions and never reach this module.
"""

from __future__ import annotations

import logging
import sys

import typer
from pydantic import ValidationError

from cinecache.cli.json_formatter import format_json_output
from cinecache.shared.constants import CLIDefaults
from cinecache.shared.errors import CineCacheError, ErrorCode

logger = logging.getLogger(__name__)


def handle_cli_error(
    error: Exception,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Log and print ``error`` and return the exit code.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        json_output: Whether to output JSON format

    Returns:
        Exit code for the CLI command
    """
    code, message = _describe(error)

    if isinstance(error, CineCacheError):
        logger.error(
            "CLI error in %s: %s",
            command,
            message,
            extra={"error_code": code.name, "context": error.context.safe_dict()},
        )
    else:
        logger.exception("CLI error in %s: %s", command, message)

    if json_output:
        output = format_json_output(
            success=False,
            command=command,
            errors=[message],
            data={"error_code": code.value, "error_type": type(error).__name__},
        )
        typer.echo(output.decode("utf-8"))
    else:
        sys.stderr.write(f"Error: {message}\n")

    return CLIDefaults.EXIT_ERROR


def _describe(error: Exception) -> tuple[ErrorCode, str]:
    if isinstance(error, CineCacheError):
        return error.code, error.message
    if isinstance(error, ValidationError):
        return ErrorCode.INVALID_CONFIG, f"Invalid configuration: {error}"
    return ErrorCode.CLI_UNEXPECTED_ERROR, f"Unexpected error: {error}"
