"""Sync engine exports."""

from .coordinator import SyncCoordinator
from .progress import NullSyncProgress, SyncProgress
from .trigger import SyncTrigger

__all__ = ["NullSyncProgress", "SyncCoordinator", "SyncProgress", "SyncTrigger"]
