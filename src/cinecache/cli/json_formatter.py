"""
JSON Output Formatter for the CineCache CLI

Produces the machine-readable envelope printed when ``--json`` is given.
"""

from __future__ import annotations

from dataclasses import is_dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

import orjson

from cinecache.shared.utils import to_dict


def format_json_output(
    success: bool,
    command: str,
    data: Any | None = None,
    errors: list[str] | None = None,
    warnings: list[str] | None = None,
) -> bytes:
    """
    Format command output as JSON.

    Args:
        success: Whether the command executed successfully
        command: The command name (e.g., "trending", "search")
        data: The command's output data
        errors: List of error messages
        warnings: List of warning messages

    Returns:
        JSON-encoded bytes ready for output

    Example:
        >>> output = format_json_output(
        ...     success=True,
        ...     command="search",
        ...     data={"movies": [], "source": "cache"},
        ... )
    """
    errors = errors or []
    warnings = warnings or []

    if errors:
        success = False

    json_data = {
        "success": success,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "command": command,
        "data": safe_json_serialize(data),
        "errors": errors,
        "warnings": warnings,
    }

    return orjson.dumps(
        json_data,
        option=orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2,
    )


def safe_json_serialize(obj: Any) -> Any:
    """
    Convert an object into JSON-serializable primitives.

    Dataclasses become dicts and enums their values.

    Example:
        >>> safe_json_serialize(MovieSummary(id=5, title="Dune"))
        {'id': 5, 'title': 'Dune', 'overview': '', 'poster_path': None}
    """
    if isinstance(obj, Enum):
        return obj.value
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    if isinstance(obj, (list, tuple)):
        return [safe_json_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {str(k): safe_json_serialize(v) for k, v in obj.items()}
    if is_dataclass(obj) and not isinstance(obj, type):
        return safe_json_serialize(to_dict(obj))
    return str(obj)
