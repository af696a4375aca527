"""Shared test fixtures for catalogsync tests."""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

import pytest

from catalogsync.contracts.config import CatalogSyncConfig
from catalogsync.contracts.record import CatalogRecord

BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)


def make_record(record_id: int, *, minutes: int = 0, title: str | None = None, **fields: object) -> CatalogRecord:
    """A valid record modified ``minutes`` after BASE_TIME."""
    return CatalogRecord(
        id=record_id,
        title=title or f"Title {record_id}",
        modified_at=BASE_TIME + timedelta(minutes=minutes),
        created_at=BASE_TIME,
        **fields,
    )


def wire_row(record_id: int | str, *, updated_at: str | None = "2024-05-01 12:00:00", **fields: object) -> dict:
    """A source row keyed by wire column names."""
    row: dict[str, object] = {
        "id": record_id,
        "title_jp": f"Title {record_id}",
        "title_cn": None,
        "brand": "Studio",
        "release_date": "2023-01-15 00:00:00",
        "synopsis": None,
        "cover_url": None,
        "preview_urls": None,
        "tags": None,
        "download_link": None,
        "created_at": "2024-01-01 00:00:00",
        "updated_at": updated_at,
        "wordpress_post_id": None,
    }
    row.update(fields)
    return row


@pytest.fixture
def records() -> list[CatalogRecord]:
    """Three records modified one minute apart."""
    return [make_record(1, minutes=0), make_record(2, minutes=1), make_record(3, minutes=2)]


@pytest.fixture
def api_config(tmp_path: Path) -> CatalogSyncConfig:
    return CatalogSyncConfig(
        source="api",
        api={"base_url": "https://catalog.test/api", "auth": "token", "public_key": "pub", "private_key": "priv"},
        store_path=tmp_path / "catalog.db",
    )
