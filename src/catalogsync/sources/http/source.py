"""Catalog source backed by the authenticated HTTP data-service API."""

from __future__ import annotations

import logging
from datetime import datetime
from types import TracebackType
from typing import Any

import httpx
from pydantic import ValidationError

from catalogsync.auth.base import Credentials
from catalogsync.contracts.exceptions import AuthenticationError, SourceError
from catalogsync.contracts.record import CatalogRecord
from catalogsync.contracts.source import RemoteSource
from catalogsync.sources.http._retrying_transport import RetryingTransport
from catalogsync.sources.http.models import DataServiceResponse
from catalogsync.sources.utils import parse_ids, parse_records, select_modified_since

_LOG = logging.getLogger(__name__)

_SINCE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class HttpCatalogSource(RemoteSource):
    """Reads identifiers and updates from ``{base_url}{ids_path}`` / ``{updates_path}``.

    Every request carries HTTP basic auth and a bounded timeout; transient
    failures are retried by :class:`RetryingTransport` before surfacing as
    :class:`SourceError`.
    """

    def __init__(
        self,
        *,
        base_url: str,
        credentials: Credentials,
        ids_path: str = "/games/ids",
        updates_path: str = "/games/updates",
        timeout: float = 60.0,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._credentials = credentials
        self._ids_path = ids_path
        self._updates_path = updates_path
        self._timeout = timeout
        self._max_retries = max_retries
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> HttpCatalogSource:
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            auth=httpx.BasicAuth(self._credentials.public_key, self._credentials.private_key),
            timeout=httpx.Timeout(self._timeout),
            transport=RetryingTransport(transport=self._transport, max_retries=self._max_retries),
            headers={"Accept": "application/json", "User-Agent": "catalogsync"},
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def list_active_ids(self) -> list[int]:
        rows = await self._get_rows(self._ids_path)
        ids = parse_ids(row.get("id") for row in rows)
        _LOG.debug("Remote reports %d active ids", len(ids))
        return ids

    async def list_modified_since(self, since: datetime) -> list[CatalogRecord]:
        rows = await self._get_rows(self._updates_path, params={"since": since.strftime(_SINCE_FORMAT)})
        records = select_modified_since(parse_records(rows), since)
        _LOG.debug("Remote returned %d rows, %d modified since %s", len(rows), len(records), since)
        return records

    async def _get_rows(self, path: str, params: dict[str, str] | None = None) -> list[dict[str, Any]]:
        if self._client is None:
            raise SourceError("HttpCatalogSource used outside of its async context")

        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise SourceError(f"request to {path} failed: {exc}") from exc

        if response.status_code in (401, 403):
            raise AuthenticationError(f"catalog API rejected credentials (HTTP {response.status_code})")
        if response.is_error:
            raise SourceError(f"catalog API returned HTTP {response.status_code} for {path}")

        try:
            envelope = DataServiceResponse.model_validate_json(response.content)
        except ValidationError as exc:
            _LOG.debug("Unparseable response from %s: %s", path, response.text[:500])
            raise SourceError(f"malformed response envelope from {path}") from exc

        if not envelope.ok:
            result = envelope.data.result
            raise SourceError(f"catalog API returned code {result.code}: {result.message}")
        return envelope.data.rows
