"""Connectivity probe configuration model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from cinecache.shared.constants import ConnectivityDefaults


class ConnectivitySettings(BaseModel):
    """Connectivity probe configuration.

    The probe validates internet reachability with a TCP connect to
    ``probe_host:probe_port``.
    """

    probe_host: str = Field(
        default=ConnectivityDefaults.PROBE_HOST,
        description="Host used to validate internet reachability",
    )
    probe_port: int = Field(
        default=ConnectivityDefaults.PROBE_PORT,
        gt=0,
        lt=65536,
        description="TCP port used to validate internet reachability",
    )
    probe_timeout: float = Field(
        default=ConnectivityDefaults.PROBE_TIMEOUT,
        gt=0,
        description="Seconds to wait for the validation connect",
    )


__all__ = ["ConnectivitySettings"]
