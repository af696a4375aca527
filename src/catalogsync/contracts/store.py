"""Local store adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from datetime import datetime

from pydantic import BaseModel

from catalogsync.contracts.record import CatalogRecord


class RecordFilter(BaseModel):
    """Read-path filter. Every whitespace-separated keyword must match."""

    keyword: str = ""

    @property
    def keywords(self) -> list[str]:
        return self.keyword.split()


class LocalStore(ABC):
    """Persistent table of catalog records keyed by identifier.

    Methods are blocking; callers on an event loop run them in a worker thread.
    """

    @abstractmethod
    def list_ids(self) -> set[int]: ...  # pragma: no cover

    @abstractmethod
    def max_modified_at(self) -> datetime:
        """Return the newest ``modified_at`` stored, or ``EPOCH`` when empty."""

    @abstractmethod
    def delete_by_ids(self, ids: Iterable[int]) -> int:
        """Delete the given identifiers in one transaction; return rows removed."""

    @abstractmethod
    def upsert_all(self, records: Sequence[CatalogRecord]) -> int:
        """Insert or overwrite records in one transaction; return rows applied.

        Rows that fail individually are skipped. Locally-owned fields of
        existing rows are preserved.
        """

    @abstractmethod
    def list_records(
        self, filter: RecordFilter | None = None, limit: int = 50, offset: int = 0
    ) -> list[CatalogRecord]: ...  # pragma: no cover

    @abstractmethod
    def get_record(self, record_id: int) -> CatalogRecord: ...  # pragma: no cover

    @abstractmethod
    def set_resolved_link(self, record_id: int, link: str | None) -> None: ...  # pragma: no cover

    @abstractmethod
    def close(self) -> None: ...  # pragma: no cover
