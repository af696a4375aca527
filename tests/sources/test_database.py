from __future__ import annotations

import sqlite3
from datetime import datetime

import pytest

from catalogsync.contracts.exceptions import ConfigError, SourceError
from catalogsync.contracts.record import EPOCH
from catalogsync.sources.database import DatabaseCatalogSource

_GAMES_DDL = """
CREATE TABLE games (
    id INTEGER PRIMARY KEY,
    title_jp TEXT,
    title_cn TEXT,
    brand TEXT,
    release_date TEXT,
    synopsis TEXT,
    cover_url TEXT,
    preview_urls TEXT,
    tags TEXT,
    download_link TEXT,
    created_at TEXT,
    updated_at TEXT,
    wordpress_post_id INTEGER
)
"""


@pytest.fixture
def catalog_url(tmp_path) -> str:
    path = tmp_path / "source.db"
    conn = sqlite3.connect(path)
    conn.execute(_GAMES_DDL)
    conn.executemany(
        "INSERT INTO games (id, title_jp, brand, release_date, download_link, updated_at) VALUES (?, ?, ?, ?, ?, ?)",
        [
            (1, "First", "Studio", "2021-03-01 00:00:00", "https://source.test/1", "2024-05-01 12:00:00"),
            (2, "Second", "Studio", None, None, "2024-05-01 12:00:01"),
            (3, "Third", "Other", None, None, None),
            (4, "", "Broken", None, None, "2024-05-02 00:00:00"),
        ],
    )
    conn.commit()
    conn.close()
    return f"sqlite:///{path}"


@pytest.mark.asyncio
async def test_list_active_ids(catalog_url: str) -> None:
    async with DatabaseCatalogSource(url=catalog_url) as source:
        ids = await source.list_active_ids()

    assert sorted(ids) == [1, 2, 3, 4]


@pytest.mark.asyncio
async def test_full_resync_returns_every_valid_row(catalog_url: str) -> None:
    async with DatabaseCatalogSource(url=catalog_url) as source:
        records = await source.list_modified_since(EPOCH)

    assert [record.id for record in records] == [3, 1, 2]
    first = next(record for record in records if record.id == 1)
    assert first.title == "First"
    assert first.publisher == "Studio"
    assert first.external_link == "https://source.test/1"
    assert first.release_date == datetime(2021, 3, 1)


@pytest.mark.asyncio
async def test_incremental_fetch_is_strict(catalog_url: str) -> None:
    async with DatabaseCatalogSource(url=catalog_url) as source:
        records = await source.list_modified_since(datetime(2024, 5, 1, 12, 0, 0))

    assert [record.id for record in records] == [2]


@pytest.mark.asyncio
async def test_custom_table_name(tmp_path) -> None:
    path = tmp_path / "other.db"
    conn = sqlite3.connect(path)
    conn.execute(_GAMES_DDL.replace("games", "titles"))
    conn.execute("INSERT INTO titles (id, title_jp) VALUES (10, 'Only')")
    conn.commit()
    conn.close()

    async with DatabaseCatalogSource(url=f"sqlite:///{path}", table="titles") as source:
        assert await source.list_active_ids() == [10]


def test_invalid_table_name_is_rejected() -> None:
    with pytest.raises(ConfigError):
        DatabaseCatalogSource(url="sqlite://", table="games; DROP TABLE games")


@pytest.mark.asyncio
async def test_missing_table_raises_source_error(tmp_path) -> None:
    async with DatabaseCatalogSource(url=f"sqlite:///{tmp_path / 'empty.db'}") as source:
        with pytest.raises(SourceError, match="query failed"):
            await source.list_active_ids()


@pytest.mark.asyncio
async def test_unknown_driver_raises_source_error() -> None:
    with pytest.raises(SourceError, match="failed to connect"):
        async with DatabaseCatalogSource(url="nosuchdialect://host/db"):
            pass


@pytest.mark.asyncio
async def test_query_outside_context_raises(catalog_url: str) -> None:
    with pytest.raises(SourceError):
        await DatabaseCatalogSource(url=catalog_url).list_active_ids()
