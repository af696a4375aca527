"""Exception hierarchy for catalogsync.

All catalogsync exceptions inherit from :class:`CatalogSyncError`, so callers
can catch any library error with a single ``except`` clause while still being
able to handle specific failure modes.
"""

from __future__ import annotations


class CatalogSyncError(Exception):
    """Base exception for all catalogsync errors."""


class ConfigError(CatalogSyncError):
    """Configuration loading or validation failure."""


class SourceError(CatalogSyncError):
    """Remote source operation failure (network, protocol or query)."""


class AuthenticationError(SourceError):
    """Remote source rejected or could not obtain credentials."""


class StoreError(CatalogSyncError):
    """Local store operation failure."""


class RecordNotFoundError(StoreError):
    """No record with the requested identifier exists in the local store."""

    def __init__(self, record_id: int) -> None:
        super().__init__(f"Record not found: {record_id}")
        self.record_id = record_id


class SyncError(CatalogSyncError):
    """Reconciliation pass failure."""
