"""Catalog record contract and wire-value parsing."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

EPOCH = datetime(1970, 1, 1)

# Layout the catalog source documents for its DATETIME columns.
SOURCE_TIMESTAMP_LAYOUT = "%Y-%m-%d %H:%M:%S"

# Wire/column name -> CatalogRecord field name.
WIRE_FIELD_NAMES: dict[str, str] = {
    "id": "id",
    "title_jp": "title",
    "title_cn": "title_localized",
    "brand": "publisher",
    "release_date": "release_date",
    "synopsis": "synopsis",
    "cover_url": "cover_url",
    "preview_urls": "preview_urls",
    "tags": "tags",
    "download_link": "external_link",
    "wordpress_post_id": "external_ref_id",
    "created_at": "created_at",
    "updated_at": "modified_at",
}


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a remote timestamp into a naive UTC instant.

    Accepts ``datetime`` objects, the source layout ``YYYY-MM-DD HH:MM:SS`` and
    ISO-8601/RFC 3339 strings. Anything else, including empty strings, is
    treated as missing and yields ``None``.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        try:
            parsed = datetime.strptime(raw, SOURCE_TIMESTAMP_LAYOUT)
        except ValueError:
            try:
                parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
            except ValueError:
                return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def format_timestamp(value: datetime) -> str:
    """Render an instant in the sortable text form stored locally."""
    return value.isoformat(sep=" ")


def _parse_optional_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class CatalogRecord(BaseModel):
    """One catalog entry as mirrored from the remote source.

    ``resolved_link`` is the only locally-owned field: it is never read from
    the remote source and is preserved when the record is upserted.
    """

    id: int
    title: str = Field(min_length=1)
    title_localized: str | None = None
    publisher: str | None = None
    release_date: datetime | None = None
    synopsis: str | None = None
    cover_url: str | None = None
    preview_urls: str | None = None
    tags: str | None = None
    external_link: str | None = None
    external_ref_id: int | None = None
    created_at: datetime | None = None
    modified_at: datetime | None = None
    resolved_link: str | None = None

    model_config = {"frozen": True}

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, str):
            return int(value.strip())
        return value

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("release_date", "created_at", "modified_at", mode="before")
    @classmethod
    def _coerce_timestamp(cls, value: Any) -> datetime | None:
        return parse_timestamp(value)

    @field_validator("external_ref_id", mode="before")
    @classmethod
    def _coerce_external_ref_id(cls, value: Any) -> int | None:
        return _parse_optional_int(value)

    @classmethod
    def from_wire(cls, row: dict[str, Any]) -> CatalogRecord:
        """Build a record from a source row keyed by wire/column names.

        Raises:
            pydantic.ValidationError: If the row lacks a usable id or title.
        """
        payload = {field: row.get(wire) for wire, field in WIRE_FIELD_NAMES.items()}
        return cls.model_validate(payload)

    @property
    def display_title(self) -> str:
        return self.title_localized or self.title

    @property
    def download_link(self) -> str | None:
        """Locally resolved link when set, otherwise the source-provided one."""
        return self.resolved_link or self.external_link
