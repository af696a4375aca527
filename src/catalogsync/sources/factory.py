"""Factory for creating remote source instances.

Decouples backend selection from backend implementation: callers pick a source
by the configured name without importing the concrete adapters.
"""

from __future__ import annotations

from collections.abc import Callable

from catalogsync.auth.base import Credentials
from catalogsync.contracts.config import CatalogSyncConfig
from catalogsync.contracts.exceptions import ConfigError
from catalogsync.contracts.source import RemoteSource
from catalogsync.sources.database import DatabaseCatalogSource
from catalogsync.sources.http import HttpCatalogSource

SourceBuilder = Callable[[CatalogSyncConfig, Credentials | None], RemoteSource]


def _build_http_source(config: CatalogSyncConfig, credentials: Credentials | None) -> RemoteSource:
    if config.api is None:
        raise ConfigError("source 'api' requires an 'api' section")
    if credentials is None:
        raise ConfigError("source 'api' requires credentials")
    return HttpCatalogSource(
        base_url=config.api.base_url,
        credentials=credentials,
        ids_path=config.api.ids_path,
        updates_path=config.api.updates_path,
        timeout=config.timeout_seconds,
        max_retries=config.max_retries,
    )


def _build_database_source(config: CatalogSyncConfig, credentials: Credentials | None) -> RemoteSource:
    del credentials
    if not config.database_url:
        raise ConfigError("source 'database' requires a database_url")
    return DatabaseCatalogSource(url=config.database_url, table=config.table, timeout=config.timeout_seconds)


_REGISTRY: dict[str, SourceBuilder] = {
    "api": _build_http_source,
    "database": _build_database_source,
}


def register(name: str, builder: SourceBuilder) -> None:
    """Register a source builder under *name*."""
    _REGISTRY[name] = builder


def create_source(config: CatalogSyncConfig, credentials: Credentials | None = None) -> RemoteSource:
    """Create the remote source selected by ``config.source``.

    The returned source is an async context manager::

        async with create_source(config, credentials) as source:
            ids = await source.list_active_ids()

    Raises:
        ConfigError: If the source name is not registered or under-configured.
    """
    builder = _REGISTRY.get(config.source)
    if builder is None:
        available = ", ".join(sorted(_REGISTRY)) or "(none registered)"
        raise ConfigError(f"Unknown source: {config.source!r}. Available: {available}")
    return builder(config, credentials)
