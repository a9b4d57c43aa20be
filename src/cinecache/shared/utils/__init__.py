"""Shared utilities for CineCache."""

from .dataclass_serialization import from_dict, to_dict

__all__ = ["from_dict", "to_dict"]
