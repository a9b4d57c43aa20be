"""Logging configuration model."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    file: str | None = Field(default=None, description="Optional JSON log file path")
    console_output: bool = Field(default=True, description="Enable rich console logging")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in _LEVELS:
            msg = f"Invalid log level: {value}. Expected one of {', '.join(_LEVELS)}"
            raise ValueError(msg)
        return upper


__all__ = ["LoggingSettings"]
