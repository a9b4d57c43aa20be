"""
CineCache Constants Module

Centralized constants for the CineCache application. Magic values are
defined here so every module shares a single source of truth.
"""

from .cache import CacheMessages, MovieStoreConfig
from .cli import CLICommands, CLIDefaults, CLIHelp
from .http_codes import HTTPHeaders, HTTPStatusCodes
from .network import ConnectivityDefaults, TMDBDefaults
from .tmdb_messages import TMDBEndpoints, TMDBErrorMessages, TMDBOperationNames

__all__ = [
    "CLICommands",
    "CLIDefaults",
    "CLIHelp",
    "CacheMessages",
    "ConnectivityDefaults",
    "HTTPHeaders",
    "HTTPStatusCodes",
    "MovieStoreConfig",
    "TMDBDefaults",
    "TMDBEndpoints",
    "TMDBErrorMessages",
    "TMDBOperationNames",
]
