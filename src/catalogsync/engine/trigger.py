"""Background entry points into the sync coordinator."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from catalogsync.contracts.sync import SyncResult
from catalogsync.engine.coordinator import SyncCoordinator

logger = logging.getLogger(__name__)


class SyncTrigger:
    """Schedules coordinator passes as fire-and-forget tasks.

    ``start`` runs the startup pass; ``request_sync`` is the user-initiated
    refresh. Requests arriving while a pass is running are dropped.
    """

    def __init__(
        self,
        coordinator: SyncCoordinator,
        *,
        on_result: Callable[[SyncResult], None] | None = None,
    ) -> None:
        self._coordinator = coordinator
        self._on_result = on_result
        self._tasks: set[asyncio.Task[SyncResult]] = set()

    def start(self) -> asyncio.Task[SyncResult] | None:
        logger.info("Scheduling startup sync")
        return self.request_sync()

    def request_sync(self) -> asyncio.Task[SyncResult] | None:
        if self._coordinator.running:
            logger.info("Sync already in progress, refresh request dropped")
            return None
        task = asyncio.get_running_loop().create_task(self._run())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait(self) -> list[SyncResult]:
        """Wait for every pass scheduled so far; cancelled passes are left out."""
        if not self._tasks:
            return []
        outcomes = await asyncio.gather(*self._tasks, return_exceptions=True)
        for outcome in outcomes:
            if isinstance(outcome, BaseException) and not isinstance(outcome, asyncio.CancelledError):
                raise outcome
        return [outcome for outcome in outcomes if isinstance(outcome, SyncResult)]

    async def aclose(self) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def _run(self) -> SyncResult:
        result = await self._coordinator.run()
        if result.busy:
            logger.info("Sync skipped: another pass is running")
        elif not result.ok:
            logger.error("Background sync failed: %s", result.error)
        if self._on_result is not None:
            try:
                self._on_result(result)
            except Exception:
                logger.exception("Sync result callback raised")
        return result
