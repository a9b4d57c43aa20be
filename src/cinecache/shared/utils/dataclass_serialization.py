"""Dataclass serialization utilities for CineCache.

Converts the movie dataclasses to/from plain dictionaries, which is the
shape of both TMDB JSON payloads and SQLite rows.

Design Principles:
- Type-safe at the API boundary: scalar fields are checked against
  their annotations so a malformed payload fails loudly
- Unknown keys are ignored by default (TMDB returns many extra fields)
"""

from __future__ import annotations

from dataclasses import MISSING, asdict, fields, is_dataclass
from typing import Any, get_args, get_origin, get_type_hints

_SCALAR_TYPES: tuple[type, ...] = (str, int, float, bool)


def to_dict(obj: Any) -> dict[str, Any]:
    """Convert dataclass to dictionary.

    Args:
        obj: Dataclass instance to convert

    Returns:
        Dictionary representation of the dataclass

    Raises:
        TypeError: If obj is not a dataclass

    Example:
        >>> @dataclass
        ... class User:
        ...     name: str
        ...     age: int
        >>> to_dict(User(name="Alice", age=30))
        {'name': 'Alice', 'age': 30}
    """
    if not is_dataclass(obj) or isinstance(obj, type):
        error_msg = f"{type(obj).__name__} is not a dataclass instance"
        raise TypeError(error_msg)

    return asdict(obj)


def _unwrap_optional(field_type: Any) -> tuple[Any, bool]:
    """Return (inner type, is_optional) for ``T | None`` annotations."""
    origin = get_origin(field_type)
    if origin is None or origin in (list, dict):
        return field_type, False

    args = get_args(field_type)
    actual_types = [a for a in args if a is not type(None)]
    optional = len(actual_types) != len(args)
    if len(actual_types) == 1:
        return actual_types[0], optional
    return field_type, optional


def _check_scalar(name: str, field_type: Any, value: Any) -> None:
    if field_type not in _SCALAR_TYPES:
        return
    # bool is an int subclass; never accept it for numeric fields
    if isinstance(value, bool) and field_type is not bool:
        error_msg = f"Field '{name}' expects {field_type.__name__}, got bool"
        raise TypeError(error_msg)
    if field_type is float and isinstance(value, int):
        return
    if not isinstance(value, field_type):
        error_msg = (
            f"Field '{name}' expects {field_type.__name__}, "
            f"got {type(value).__name__}"
        )
        raise TypeError(error_msg)


def from_dict(cls: type, data: dict[str, Any], extra: str = "ignore") -> Any:
    """Create dataclass instance from dictionary.

    Supports:
    - Scalar type validation (str, int, float, bool)
    - Optional fields (``T | None``)
    - Nested dataclasses and lists of dataclasses
    - Field aliases via ``field(metadata={"alias": ...})``
    - extra='forbid' mode

    Args:
        cls: Dataclass class to instantiate
        data: Dictionary with field values
        extra: How to handle extra fields - "ignore" (default) or "forbid"

    Returns:
        Dataclass instance

    Raises:
        TypeError: If data is not a dict, a value has the wrong type, or
            extra='forbid' and extra fields are found
        KeyError: If a required field is missing
    """
    if not is_dataclass(cls):
        error_msg = f"{cls.__name__} is not a dataclass"
        raise TypeError(error_msg)
    if not isinstance(data, dict):
        error_msg = f"Expected a mapping for {cls.__name__}, got {type(data).__name__}"
        raise TypeError(error_msg)

    type_hints = get_type_hints(cls)

    if extra == "forbid":
        allowed_keys: set[str] = set()
        for f in fields(cls):
            allowed_keys.add(f.name)
            if f.metadata and "alias" in f.metadata:
                allowed_keys.add(f.metadata["alias"])
        extra_keys = set(data) - allowed_keys
        if extra_keys:
            error_msg = f"Extra fields not allowed: {sorted(extra_keys)}"
            raise TypeError(error_msg)

    result: dict[str, Any] = {}

    for field in fields(cls):
        field_key = None
        if field.name in data:
            field_key = field.name
        elif field.metadata and field.metadata.get("alias") in data:
            field_key = field.metadata["alias"]

        if field_key is None:
            if field.default is not MISSING or field.default_factory is not MISSING:
                continue
            raise KeyError(f"Missing required field: {field.name}")

        value = data[field_key]
        field_type, optional = _unwrap_optional(type_hints.get(field.name))

        if value is None:
            if not optional:
                error_msg = f"Field '{field.name}' must not be null"
                raise TypeError(error_msg)
            result[field.name] = None
        elif is_dataclass(field_type) and isinstance(value, dict):
            result[field.name] = from_dict(field_type, value)
        elif get_origin(field_type) is list:
            if not isinstance(value, list):
                error_msg = f"Field '{field.name}' expects list, got {type(value).__name__}"
                raise TypeError(error_msg)
            item_args = get_args(field_type)
            item_type = item_args[0] if item_args else None
            if item_type is not None and is_dataclass(item_type):
                result[field.name] = [from_dict(item_type, item) for item in value]
            else:
                result[field.name] = value
        else:
            _check_scalar(field.name, field_type, value)
            result[field.name] = value

    return cls(**result)


__all__ = ["from_dict", "to_dict"]
