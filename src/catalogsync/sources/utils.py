"""Helpers shared by remote source adapters."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from catalogsync.contracts.record import EPOCH, CatalogRecord

logger = logging.getLogger(__name__)


def parse_records(rows: Iterable[dict[str, Any]]) -> list[CatalogRecord]:
    """Convert wire rows to records, skipping rows that fail validation."""
    records: list[CatalogRecord] = []
    for row in rows:
        try:
            records.append(CatalogRecord.from_wire(row))
        except ValidationError as exc:
            logger.warning("Skipping malformed remote row %r: %s", row.get("id"), exc.errors()[0]["msg"])
    return records


def parse_ids(values: Iterable[Any]) -> list[int]:
    """Convert wire identifiers to ints, skipping values that are not integral."""
    ids: list[int] = []
    for value in values:
        if isinstance(value, bool):
            logger.warning("Skipping non-integer remote id %r", value)
            continue
        try:
            ids.append(int(str(value).strip()))
        except ValueError:
            logger.warning("Skipping non-integer remote id %r", value)
    return ids


def select_modified_since(records: Iterable[CatalogRecord], since: datetime) -> list[CatalogRecord]:
    """Keep records modified strictly after *since*, oldest first.

    Records without a modification time only qualify for a full resync.
    """
    full_resync = since <= EPOCH
    selected = [
        record
        for record in records
        if (record.modified_at is not None and record.modified_at > since)
        or (record.modified_at is None and full_resync)
    ]
    return sorted(selected, key=lambda record: (record.modified_at or EPOCH, record.id))
