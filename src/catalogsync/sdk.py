"""SDK composition root for catalogsync."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from types import TracebackType

from catalogsync.auth import CredentialResolver, Credentials, create_credential_resolver
from catalogsync.contracts.config import CatalogSyncConfig
from catalogsync.contracts.exceptions import SyncError
from catalogsync.contracts.source import RemoteSource
from catalogsync.contracts.store import LocalStore, RecordFilter
from catalogsync.contracts.sync import SyncResult
from catalogsync.contracts.views import RecordDetails, RecordSummary
from catalogsync.engine import SyncCoordinator, SyncProgress, SyncTrigger
from catalogsync.sources import create_source
from catalogsync.store import SqliteCatalogStore

logger = logging.getLogger(__name__)


class CatalogSync:
    """catalogsync SDK public API.

    Owns one remote source, one local store, the coordinator that reconciles
    them and the trigger that schedules background passes::

        async with await CatalogSync.from_config(config) as catalog:
            catalog.start()
            rows = await catalog.search("keyword")

    Without a source (``connect=False``) only the read path is available.
    """

    def __init__(
        self,
        *,
        source: RemoteSource | None,
        store: LocalStore,
        progress: SyncProgress | None = None,
        on_result: Callable[[SyncResult], None] | None = None,
    ) -> None:
        self._source = source
        self._store = store
        self._on_result = on_result
        self._coordinator = SyncCoordinator(source, store, progress=progress) if source is not None else None
        self._trigger = (
            SyncTrigger(self._coordinator, on_result=self._record_result) if self._coordinator is not None else None
        )
        self._source_open = False
        self._ready = source is None

    @classmethod
    async def from_config(
        cls,
        config: CatalogSyncConfig,
        *,
        connect: bool = True,
        credential_resolver: CredentialResolver | None = None,
        progress: SyncProgress | None = None,
        on_result: Callable[[SyncResult], None] | None = None,
    ) -> CatalogSync:
        source: RemoteSource | None = None
        if connect:
            credentials: Credentials | None = None
            if config.source == "api" and config.api is not None:
                resolver = credential_resolver or create_credential_resolver(config.api)
                credentials = await resolver.resolve()
            source = create_source(config, credentials)
        store = await asyncio.to_thread(SqliteCatalogStore, config.store_path)
        return cls(source=source, store=store, progress=progress, on_result=on_result)

    async def __aenter__(self) -> CatalogSync:
        if self._source is not None:
            try:
                await self._source.__aenter__()
            except BaseException:
                self._store.close()
                raise
            self._source_open = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        try:
            if self._trigger is not None:
                await self._trigger.aclose()
            if self._source is not None and self._source_open:
                self._source_open = False
                await self._source.__aexit__(exc_type, exc_val, exc_tb)
        finally:
            self._store.close()

    @property
    def store(self) -> LocalStore:
        return self._store

    @property
    def ready(self) -> bool:
        """True once a pass has finished, or immediately for a read-only instance.

        A failed pass still marks the instance ready: the cache is stale but usable.
        """
        return self._ready

    async def sync(self) -> SyncResult:
        """Run one reconciliation pass and wait for its outcome."""
        result = await self._require_coordinator().run()
        if not result.busy:
            self._ready = True
        return result

    def start(self) -> asyncio.Task[SyncResult] | None:
        """Schedule the startup pass in the background."""
        return self._require_trigger().start()

    def request_sync(self) -> asyncio.Task[SyncResult] | None:
        """Fire-and-forget refresh; dropped if a pass is already running."""
        return self._require_trigger().request_sync()

    async def wait_for_sync(self) -> list[SyncResult]:
        return await self._require_trigger().wait()

    async def search(self, keyword: str = "", *, limit: int = 50, offset: int = 0) -> list[RecordSummary]:
        records = await asyncio.to_thread(self._store.list_records, RecordFilter(keyword=keyword.strip()), limit, offset)
        return [RecordSummary.from_record(record) for record in records]

    async def get_details(self, record_id: int) -> RecordDetails:
        record = await asyncio.to_thread(self._store.get_record, record_id)
        return RecordDetails.from_record(record)

    async def set_download_link(self, record_id: int, link: str | None) -> None:
        await asyncio.to_thread(self._store.set_resolved_link, record_id, link)
        logger.info("Updated download link for record %d", record_id)

    def _record_result(self, result: SyncResult) -> None:
        if not result.busy:
            self._ready = True
        if self._on_result is not None:
            self._on_result(result)

    def _require_coordinator(self) -> SyncCoordinator:
        if self._coordinator is None:
            raise SyncError("no remote source configured; open with connect=True to sync")
        if not self._source_open:
            raise SyncError("remote source is not open; use CatalogSync as an async context manager")
        return self._coordinator

    def _require_trigger(self) -> SyncTrigger:
        self._require_coordinator()
        assert self._trigger is not None
        return self._trigger
