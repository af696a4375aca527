"""SQLite-backed local catalog store."""

from __future__ import annotations

import logging
import sqlite3
import threading
from collections.abc import Iterable, Sequence
from datetime import datetime
from pathlib import Path
from types import TracebackType
from typing import Any

from pydantic import ValidationError

from catalogsync.contracts.exceptions import RecordNotFoundError, StoreError
from catalogsync.contracts.record import EPOCH, CatalogRecord, format_timestamp, parse_timestamp
from catalogsync.contracts.store import LocalStore, RecordFilter

logger = logging.getLogger(__name__)

# SQLite's default host-parameter limit is 999 on older builds.
_DELETE_CHUNK_SIZE = 500

_SCHEMA = """
CREATE TABLE IF NOT EXISTS records (
    id INTEGER PRIMARY KEY,
    title TEXT NOT NULL,
    title_localized TEXT,
    publisher TEXT,
    release_date TEXT,
    synopsis TEXT,
    cover_url TEXT,
    preview_urls TEXT,
    tags TEXT,
    external_link TEXT,
    external_ref_id INTEGER,
    created_at TEXT,
    modified_at TEXT,
    resolved_link TEXT
);
CREATE INDEX IF NOT EXISTS idx_records_title_localized ON records(title_localized);
CREATE INDEX IF NOT EXISTS idx_records_modified_at ON records(modified_at);
"""

_REMOTE_COLUMNS = (
    "id",
    "title",
    "title_localized",
    "publisher",
    "release_date",
    "synopsis",
    "cover_url",
    "preview_urls",
    "tags",
    "external_link",
    "external_ref_id",
    "created_at",
    "modified_at",
)

# resolved_link is locally owned and deliberately absent from the update list.
_UPSERT_SQL = "INSERT INTO records ({columns}) VALUES ({values}) ON CONFLICT(id) DO UPDATE SET {updates}".format(
    columns=", ".join(_REMOTE_COLUMNS),
    values=", ".join(f":{column}" for column in _REMOTE_COLUMNS),
    updates=", ".join(f"{column}=excluded.{column}" for column in _REMOTE_COLUMNS if column != "id"),
)

_SELECT_COLUMNS = ", ".join((*_REMOTE_COLUMNS, "resolved_link"))

_SEARCH_COLUMNS = ("title", "title_localized", "publisher")

# Errors confined to one row: constraint violations and values sqlite3 cannot bind
# (e.g. integers outside the signed 64-bit range raise OverflowError).
_RECORD_ERRORS = (sqlite3.Error, OverflowError, ValueError, TypeError)


def _to_param(value: Any) -> Any:
    if isinstance(value, datetime):
        return format_timestamp(value)
    return value


class SqliteCatalogStore(LocalStore):
    """Local store on a single SQLite file in WAL mode.

    One connection is shared between threads and serialised by a lock; readers
    in other connections see either the pre- or post-transaction state.
    """

    def __init__(self, path: str | Path, *, wal_mode: bool = True) -> None:
        self.path = Path(path)
        self._lock = threading.RLock()
        try:
            if str(self.path) != ":memory:":
                self.path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(
                str(self.path),
                check_same_thread=False,
                timeout=30.0,
                isolation_level=None,
            )
            self._conn.row_factory = sqlite3.Row
            if wal_mode:
                self._conn.execute("PRAGMA journal_mode=WAL")
            self._conn.executescript(_SCHEMA)
        except (OSError, sqlite3.Error) as exc:
            raise StoreError(f"failed to open local store: {self.path}") from exc
        logger.debug("Opened local store at %s", self.path)

    def __enter__(self) -> SqliteCatalogStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def list_ids(self) -> set[int]:
        with self._lock:
            try:
                rows = self._conn.execute("SELECT id FROM records").fetchall()
            except sqlite3.Error as exc:
                raise StoreError("failed to list local ids") from exc
        return {int(row["id"]) for row in rows}

    def max_modified_at(self) -> datetime:
        with self._lock:
            try:
                row = self._conn.execute("SELECT MAX(modified_at) AS latest FROM records").fetchone()
            except sqlite3.Error as exc:
                raise StoreError("failed to read latest modification time") from exc
        raw = row["latest"] if row is not None else None
        if raw is None:
            return EPOCH
        parsed = parse_timestamp(raw)
        if parsed is None:
            raise StoreError(f"unparseable modification time in local store: {raw!r}")
        return parsed

    def delete_by_ids(self, ids: Iterable[int]) -> int:
        id_list = sorted(set(ids))
        if not id_list:
            return 0
        with self._lock:
            deleted = 0
            try:
                self._conn.execute("BEGIN IMMEDIATE")
                for start in range(0, len(id_list), _DELETE_CHUNK_SIZE):
                    chunk = id_list[start : start + _DELETE_CHUNK_SIZE]
                    placeholders = ", ".join("?" for _ in chunk)
                    cursor = self._conn.execute(f"DELETE FROM records WHERE id IN ({placeholders})", chunk)
                    deleted += cursor.rowcount
                self._conn.execute("COMMIT")
            except sqlite3.Error as exc:
                self._rollback()
                raise StoreError("bulk delete failed") from exc
            except BaseException:
                self._rollback()
                raise
        logger.info("Deleted %d stale records", deleted)
        return deleted

    def upsert_all(self, records: Sequence[CatalogRecord]) -> int:
        if not records:
            return 0
        with self._lock:
            applied = 0
            try:
                self._conn.execute("BEGIN IMMEDIATE")
                for record in records:
                    if self._upsert_one(record):
                        applied += 1
                self._conn.execute("COMMIT")
            except sqlite3.Error as exc:
                self._rollback()
                raise StoreError("upsert transaction failed") from exc
            except BaseException:
                self._rollback()
                raise
        logger.info("Upserted %d of %d records", applied, len(records))
        return applied

    def list_records(
        self, filter: RecordFilter | None = None, limit: int = 50, offset: int = 0
    ) -> list[CatalogRecord]:
        conditions: list[str] = []
        params: list[Any] = []
        for keyword in (filter or RecordFilter()).keywords:
            pattern = f"%{keyword}%"
            conditions.append("(" + " OR ".join(f"{column} LIKE ?" for column in _SEARCH_COLUMNS) + ")")
            params.extend(pattern for _ in _SEARCH_COLUMNS)
        where = f"WHERE {' AND '.join(conditions)}" if conditions else ""
        query = (
            f"SELECT {_SELECT_COLUMNS} FROM records {where} "
            "ORDER BY release_date IS NULL, release_date DESC, id LIMIT ? OFFSET ?"
        )
        params.extend([max(0, limit), max(0, offset)])
        with self._lock:
            try:
                rows = self._conn.execute(query, params).fetchall()
            except sqlite3.Error as exc:
                raise StoreError("record query failed") from exc
        return [record for record in (self._from_row(row) for row in rows) if record is not None]

    def get_record(self, record_id: int) -> CatalogRecord:
        with self._lock:
            try:
                row = self._conn.execute(
                    f"SELECT {_SELECT_COLUMNS} FROM records WHERE id = ?", (record_id,)
                ).fetchone()
            except sqlite3.Error as exc:
                raise StoreError(f"failed to read record {record_id}") from exc
        if row is None:
            raise RecordNotFoundError(record_id)
        record = self._from_row(row)
        if record is None:
            raise StoreError(f"stored record {record_id} is malformed")
        return record

    def set_resolved_link(self, record_id: int, link: str | None) -> None:
        value = (link or "").strip() or None
        with self._lock:
            try:
                cursor = self._conn.execute("UPDATE records SET resolved_link = ? WHERE id = ?", (value, record_id))
            except sqlite3.Error as exc:
                raise StoreError(f"failed to update link for record {record_id}") from exc
        if cursor.rowcount == 0:
            raise RecordNotFoundError(record_id)

    def close(self) -> None:
        with self._lock:
            try:
                self._conn.close()
            except sqlite3.Error as exc:
                logger.warning("Error closing local store: %s", exc)

    def _upsert_one(self, record: CatalogRecord) -> bool:
        record_id = getattr(record, "id", None)
        self._conn.execute("SAVEPOINT upsert_record")
        try:
            params = {column: _to_param(getattr(record, column, None)) for column in _REMOTE_COLUMNS}
            self._conn.execute(_UPSERT_SQL, params)
        except _RECORD_ERRORS as exc:
            self._conn.execute("ROLLBACK TO upsert_record")
            self._conn.execute("RELEASE upsert_record")
            logger.warning("Skipping record %s: %s", record_id, exc)
            return False
        self._conn.execute("RELEASE upsert_record")
        return True

    def _rollback(self) -> None:
        if not self._conn.in_transaction:
            return
        try:
            self._conn.execute("ROLLBACK")
        except sqlite3.Error as exc:
            logger.warning("Rollback failed: %s", exc)

    @staticmethod
    def _from_row(row: sqlite3.Row) -> CatalogRecord | None:
        try:
            return CatalogRecord.model_validate(dict(row))
        except ValidationError as exc:
            logger.warning("Ignoring malformed stored record %s: %s", row["id"], exc)
            return None
