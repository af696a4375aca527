"""httpx async transport wrapper that retries transient failures."""

from __future__ import annotations

import asyncio
import logging
import random

import httpx

_LOG = logging.getLogger(__name__)

# Status codes considered transient and eligible for automatic retry.
_RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})


class RetryingTransport(httpx.AsyncBaseTransport):
    """Wraps an httpx async transport with bounded retry.

    - Retries transport-level errors (connection reset, timeouts, ...)
    - Retries 429 / 502 / 503 / 504, honouring ``Retry-After`` when present
    - Exponential backoff with jitter, capped at *max_backoff* seconds

    After *max_retries* retries the last response is returned, or the last
    transport error re-raised, so the caller sees a single failure.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
        max_backoff: float = 8.0,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_retries = max_retries
        self._max_backoff = max_backoff

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            try:
                response = await self._transport.handle_async_request(request)
            except httpx.TransportError as exc:
                if attempt >= self._max_retries:
                    raise
                _LOG.warning("%s %s failed (%s), retrying", request.method, request.url, exc)
                await self._sleep_backoff(attempt)
                attempt += 1
                continue

            if response.status_code not in _RETRYABLE_STATUS_CODES or attempt >= self._max_retries:
                return response

            _LOG.warning("%s %s returned %d, retrying", request.method, request.url, response.status_code)
            retry_after = self._parse_retry_after(response)
            await response.aclose()
            if retry_after is not None:
                await asyncio.sleep(min(retry_after, self._max_backoff))
            else:
                await self._sleep_backoff(attempt)
            attempt += 1

    async def aclose(self) -> None:
        await self._transport.aclose()

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float | None:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return None
        try:
            return max(0.0, float(raw))
        except ValueError:
            return None

    async def _sleep_backoff(self, attempt: int) -> None:
        seconds = min(self._max_backoff, float(2**attempt)) + random.uniform(0.0, 0.25)
        await asyncio.sleep(seconds)
