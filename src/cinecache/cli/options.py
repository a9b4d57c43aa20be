"""
Reusable Typer Options Module

Shared option definitions for the main callback, used as ``Annotated``
metadata, e.g. ``Annotated[bool, json_output_option]``.
"""

from __future__ import annotations

import typer

log_level_option = typer.Option(
    "--log-level",
    case_sensitive=False,
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: from configuration.",
)

json_output_option = typer.Option(
    "--json",
    help="Enable machine-readable JSON output instead of a table.",
)

version_option = typer.Option(
    "--version",
    "-V",
    help="Show version information and exit.",
    is_eager=True,
)
