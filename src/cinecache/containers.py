"""Dependency Injection container for CineCache.

This module provides a centralized DI container using dependency-injector
to wire the production object graph.

The container manages:
- Settings (process-wide loader singleton)
- Local movie store (Singleton, one SQLite connection per process)
- Connectivity probe (Factory)
- TMDB client (Singleton, owns the pooled HTTP session)
- Movie repository (Factory)
"""

from __future__ import annotations

from dependency_injector import containers, providers

from cinecache.config.loader import get_config, require_api_key
from cinecache.services import (
    ConnectivityProbe,
    MovieRepository,
    MovieStore,
    TMDBClient,
)


class Container(containers.DeclarativeContainer):
    """Dependency Injection container for CineCache services.

    Example:
        >>> container = Container()
        >>> repository = container.repository()
        >>> result = await repository.get_trending()
        >>> await container.tmdb_client().close()
    """

    # Configuration
    config = providers.Singleton(get_config)

    # Local store
    movie_store = providers.Singleton(
        MovieStore,
        db_path=providers.Callable(lambda config: config.cache.db_path, config=config),
    )

    # Connectivity
    connectivity_probe = providers.Factory(
        ConnectivityProbe,
        host=providers.Callable(lambda config: config.connectivity.probe_host, config=config),
        port=providers.Callable(lambda config: config.connectivity.probe_port, config=config),
        timeout=providers.Callable(
            lambda config: config.connectivity.probe_timeout,
            config=config,
        ),
    )

    # TMDB client
    tmdb_client = providers.Singleton(
        TMDBClient,
        base_url=providers.Callable(lambda config: config.api.tmdb.base_url, config=config),
        timeout=providers.Callable(lambda config: config.api.tmdb.timeout, config=config),
    )

    # Repository
    repository = providers.Factory(
        MovieRepository,
        remote=tmdb_client,
        store=movie_store,
        probe=connectivity_probe,
        api_key=providers.Callable(require_api_key, settings=config),
        language=providers.Callable(lambda config: config.api.tmdb.language, config=config),
    )
