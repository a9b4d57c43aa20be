"""Protocol interfaces shared across CineCache layers."""

from .services import (
    ConnectivityProbeProtocol,
    MovieRemoteProtocol,
    MovieStoreProtocol,
)

__all__ = [
    "ConnectivityProbeProtocol",
    "MovieRemoteProtocol",
    "MovieStoreProtocol",
]
