"""Reconciliation pass between the remote catalog and the local store."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Sequence
from datetime import datetime

from catalogsync.contracts.record import EPOCH, CatalogRecord
from catalogsync.contracts.source import RemoteSource
from catalogsync.contracts.store import LocalStore
from catalogsync.contracts.sync import SyncPhase, SyncResult, SyncStatus
from catalogsync.engine.progress import NullSyncProgress, SyncProgress

logger = logging.getLogger(__name__)


class SyncCoordinator:
    """Runs single-flight reconciliation passes for one local store.

    A pass deletes local records missing from the remote identity set, then
    fetches records modified after the local watermark and upserts them. A
    second :meth:`run` while a pass is in flight returns a ``busy`` result
    immediately instead of waiting.
    """

    def __init__(
        self,
        source: RemoteSource,
        store: LocalStore,
        *,
        progress: SyncProgress | None = None,
    ) -> None:
        self._source = source
        self._store = store
        self._progress: SyncProgress = progress or NullSyncProgress()
        self._guard = threading.Lock()
        self._phase = SyncPhase.IDLE

    @property
    def running(self) -> bool:
        return self._guard.locked()

    async def run(self) -> SyncResult:
        if not self._guard.acquire(blocking=False):
            logger.info("Sync already in progress, skipping trigger")
            return SyncResult(status=SyncStatus.BUSY)
        try:
            return await self._run_pass()
        finally:
            self._phase = SyncPhase.IDLE
            self._guard.release()

    async def _run_pass(self) -> SyncResult:
        logger.info("Sync pass started")
        deleted = 0
        fetched = 0
        watermark: datetime | None = None
        try:
            local_ids, stale = await self._diff()
            deleted = await self._delete(stale)
            watermark = await self._resolve_watermark()
            records = self._drop_cached_undated(await self._fetch(watermark), local_ids - stale)
            fetched = len(records)
            applied = await self._upsert(records) if records else 0
        except Exception as exc:
            failed_phase = self._phase
            self._phase = SyncPhase.FAILED
            logger.exception("Sync pass failed while %s", failed_phase.value)
            return SyncResult(
                status=SyncStatus.FAILED,
                deleted=deleted,
                fetched=fetched,
                watermark=watermark,
                failed_phase=failed_phase,
                error=str(exc) or type(exc).__name__,
            )

        logger.info(
            "Sync pass completed: %d deleted, %d fetched, %d applied (watermark %s)",
            deleted,
            fetched,
            applied,
            watermark,
        )
        return SyncResult(
            status=SyncStatus.COMPLETED,
            applied=applied,
            deleted=deleted,
            fetched=fetched,
            watermark=watermark,
        )

    async def _diff(self) -> tuple[set[int], set[int]]:
        self._phase = SyncPhase.DIFFING
        self._progress.phase_start("Diff")
        try:
            remote_ids = set(await self._source.list_active_ids())
            local_ids = await asyncio.to_thread(self._store.list_ids)
            stale = local_ids - remote_ids
            logger.debug("Identity diff: %d remote, %d local, %d stale", len(remote_ids), len(local_ids), len(stale))
            self._progress.phase_done("Diff", len(stale))
            return local_ids, stale
        except BaseException as exc:
            self._progress.phase_error("Diff", exc)
            raise

    async def _delete(self, stale: set[int]) -> int:
        if not stale:
            return 0
        self._phase = SyncPhase.DELETING
        self._progress.phase_start("Delete", total=len(stale))
        try:
            deleted = await asyncio.to_thread(self._store.delete_by_ids, sorted(stale))
            self._progress.phase_done("Delete", deleted)
            return deleted
        except BaseException as exc:
            self._progress.phase_error("Delete", exc)
            raise

    async def _resolve_watermark(self) -> datetime:
        try:
            watermark = await asyncio.to_thread(self._store.max_modified_at)
        except Exception:
            logger.warning("Local watermark unreadable, falling back to a full resync", exc_info=True)
            return EPOCH
        return watermark or EPOCH

    async def _fetch(self, watermark: datetime) -> list[CatalogRecord]:
        self._phase = SyncPhase.FETCHING
        self._progress.phase_start("Fetch")
        try:
            records = await self._source.list_modified_since(watermark)
            self._progress.phase_done("Fetch", len(records))
            return records
        except BaseException as exc:
            self._progress.phase_error("Fetch", exc)
            raise

    @staticmethod
    def _drop_cached_undated(records: list[CatalogRecord], cached_ids: set[int]) -> list[CatalogRecord]:
        # Undated records carry no watermark; once cached they are not re-applied.
        kept = [record for record in records if record.modified_at is not None or record.id not in cached_ids]
        if len(kept) < len(records):
            logger.debug("Ignoring %d undated records already cached", len(records) - len(kept))
        return kept

    async def _upsert(self, records: Sequence[CatalogRecord]) -> int:
        self._phase = SyncPhase.UPSERTING
        self._progress.phase_start("Upsert", total=len(records))
        try:
            applied = await asyncio.to_thread(self._store.upsert_all, list(records))
            if applied < len(records):
                logger.warning("Skipped %d of %d fetched records", len(records) - applied, len(records))
            self._progress.phase_done("Upsert", applied)
            return applied
        except BaseException as exc:
            self._progress.phase_error("Upsert", exc)
            raise
