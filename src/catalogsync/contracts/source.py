"""Remote source adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from types import TracebackType

from catalogsync.contracts.record import CatalogRecord


class RemoteSource(ABC):
    """Read-only view of the authoritative remote catalog.

    Implementations own authentication, pagination, timeouts and transient
    retry. Any failure surfaces as :class:`~catalogsync.contracts.exceptions.SourceError`.
    """

    @abstractmethod
    async def __aenter__(self) -> RemoteSource: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def list_active_ids(self) -> list[int]:
        """Return every currently valid record identifier."""

    @abstractmethod
    async def list_modified_since(self, since: datetime) -> list[CatalogRecord]:
        """Return records modified strictly after *since*, oldest first."""
