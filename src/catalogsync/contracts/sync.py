"""Sync outcome contracts."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel


class SyncStatus(StrEnum):
    COMPLETED = "completed"
    BUSY = "busy"
    FAILED = "failed"


class SyncPhase(StrEnum):
    IDLE = "idle"
    DIFFING = "diffing"
    DELETING = "deleting"
    FETCHING = "fetching"
    UPSERTING = "upserting"
    FAILED = "failed"


class SyncResult(BaseModel):
    """Terminal outcome of one reconciliation pass."""

    status: SyncStatus
    applied: int = 0
    deleted: int = 0
    fetched: int = 0
    watermark: datetime | None = None
    failed_phase: SyncPhase | None = None
    error: str | None = None

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.status is SyncStatus.COMPLETED

    @property
    def busy(self) -> bool:
        return self.status is SyncStatus.BUSY
