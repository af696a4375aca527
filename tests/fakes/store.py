"""In-memory local store fake."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from catalogsync.contracts.exceptions import RecordNotFoundError, StoreError
from catalogsync.contracts.record import EPOCH, CatalogRecord
from catalogsync.contracts.store import LocalStore, RecordFilter


class FakeStore(LocalStore):
    """Dict-backed store with spy tracking and failure injection.

    Records whose id is in ``reject_ids`` fail individually during upsert.
    """

    def __init__(self, records: list[CatalogRecord] | None = None) -> None:
        self.records: dict[int, CatalogRecord] = {record.id: record for record in records or []}
        self.reject_ids: set[int] = set()
        self.fail_delete = False
        self.fail_upsert = False
        self.fail_watermark = False
        self.delete_calls: list[list[int]] = []
        self.upsert_calls: list[list[CatalogRecord]] = []
        self.closed = False

    def list_ids(self) -> set[int]:
        return set(self.records)

    def max_modified_at(self) -> datetime:
        if self.fail_watermark:
            raise StoreError("watermark unreadable")
        stamps = [record.modified_at for record in self.records.values() if record.modified_at is not None]
        return max(stamps, default=EPOCH)

    def delete_by_ids(self, ids: Iterable[int]) -> int:
        id_list = list(ids)
        self.delete_calls.append(id_list)
        if self.fail_delete:
            raise StoreError("delete transaction failed")
        return sum(1 for record_id in id_list if self.records.pop(record_id, None) is not None)

    def upsert_all(self, records: Sequence[CatalogRecord]) -> int:
        self.upsert_calls.append(list(records))
        if self.fail_upsert:
            raise StoreError("upsert transaction failed")
        applied = 0
        for record in records:
            if record.id in self.reject_ids:
                continue
            existing = self.records.get(record.id)
            if existing is not None and existing.resolved_link is not None:
                record = record.model_copy(update={"resolved_link": existing.resolved_link})
            self.records[record.id] = record
            applied += 1
        return applied

    def list_records(
        self, filter: RecordFilter | None = None, limit: int = 50, offset: int = 0
    ) -> list[CatalogRecord]:
        ordered = sorted(self.records.values(), key=lambda record: record.id)
        return ordered[offset : offset + limit]

    def get_record(self, record_id: int) -> CatalogRecord:
        try:
            return self.records[record_id]
        except KeyError:
            raise RecordNotFoundError(record_id) from None

    def set_resolved_link(self, record_id: int, link: str | None) -> None:
        record = self.get_record(record_id)
        self.records[record_id] = record.model_copy(update={"resolved_link": link or None})

    def close(self) -> None:
        self.closed = True
