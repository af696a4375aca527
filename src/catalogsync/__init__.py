"""Public API surface for catalogsync."""

__version__ = "1.0.2"

from catalogsync.auth import CredentialResolver, Credentials, create_credential_resolver
from catalogsync.config import load_config
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
from catalogsync.contracts.record import EPOCH, CatalogRecord
from catalogsync.contracts.source import RemoteSource
from catalogsync.contracts.store import LocalStore, RecordFilter
from catalogsync.contracts.sync import SyncPhase, SyncResult, SyncStatus
from catalogsync.contracts.views import RecordDetails, RecordSummary
from catalogsync.engine import NullSyncProgress, SyncCoordinator, SyncProgress, SyncTrigger
from catalogsync.sdk import CatalogSync
from catalogsync.sources import DatabaseCatalogSource, HttpCatalogSource, create_source
from catalogsync.store import SqliteCatalogStore

__all__ = [
    "EPOCH",
    "ApiSourceConfig",
    "AuthenticationError",
    "CatalogRecord",
    "CatalogSync",
    "CatalogSyncConfig",
    "CatalogSyncError",
    "ConfigError",
    "CredentialResolver",
    "Credentials",
    "DatabaseCatalogSource",
    "HttpCatalogSource",
    "LocalStore",
    "NullSyncProgress",
    "RecordDetails",
    "RecordFilter",
    "RecordNotFoundError",
    "RecordSummary",
    "RemoteSource",
    "SourceError",
    "SqliteCatalogStore",
    "StoreError",
    "SyncCoordinator",
    "SyncError",
    "SyncPhase",
    "SyncProgress",
    "SyncResult",
    "SyncStatus",
    "SyncTrigger",
    "__version__",
    "create_credential_resolver",
    "create_source",
    "load_config",
]
