"""Shared type definitions for CineCache."""

from .base import BaseDataclass

__all__ = ["BaseDataclass"]
