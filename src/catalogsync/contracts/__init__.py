"""Public contracts for catalogsync."""

from catalogsync.contracts.config import ApiSourceConfig, CatalogSyncConfig
from catalogsync.contracts.exceptions import (
    AuthenticationError,
    CatalogSyncError,
    ConfigError,
    RecordNotFoundError,
    SourceError,
    StoreError,
    SyncError,
)
from catalogsync.contracts.record import EPOCH, CatalogRecord, parse_timestamp
from catalogsync.contracts.source import RemoteSource
from catalogsync.contracts.store import LocalStore, RecordFilter
from catalogsync.contracts.sync import SyncPhase, SyncResult, SyncStatus

__all__ = [
    "EPOCH",
    "ApiSourceConfig",
    "AuthenticationError",
    "CatalogRecord",
    "CatalogSyncConfig",
    "CatalogSyncError",
    "ConfigError",
    "LocalStore",
    "RecordFilter",
    "RecordNotFoundError",
    "RemoteSource",
    "SourceError",
    "StoreError",
    "SyncError",
    "SyncPhase",
    "SyncResult",
    "SyncStatus",
    "parse_timestamp",
]
