"""Read-path views handed to the client application."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from catalogsync.contracts.record import CatalogRecord


def _date_or_empty(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d") if value is not None else ""


class RecordSummary(BaseModel):
    """List-row view of a cached record."""

    id: int
    title: str
    title_localized: str = ""
    publisher: str = ""
    release_date: str = ""
    cover_url: str = ""

    @classmethod
    def from_record(cls, record: CatalogRecord) -> RecordSummary:
        return cls(
            id=record.id,
            title=record.title,
            title_localized=record.title_localized or "",
            publisher=record.publisher or "",
            release_date=_date_or_empty(record.release_date),
            cover_url=record.cover_url or "",
        )


class RecordDetails(RecordSummary):
    """Detail view of a cached record."""

    synopsis: str = ""
    preview_urls: str | None = None
    tags: str = ""
    modified_at: str = ""
    download_link: str | None = None

    @classmethod
    def from_record(cls, record: CatalogRecord) -> RecordDetails:
        summary = RecordSummary.from_record(record)
        return cls(
            **summary.model_dump(),
            synopsis=record.synopsis or "",
            preview_urls=record.preview_urls,
            tags=record.tags or "",
            modified_at=record.modified_at.strftime("%Y-%m-%dT%H:%M:%SZ") if record.modified_at else "",
            download_link=record.download_link,
        )
