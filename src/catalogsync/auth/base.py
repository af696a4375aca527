"""Credential resolver interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """HTTP basic-auth key pair for the catalog API."""

    public_key: str
    private_key: str = field(repr=False)


class CredentialResolver(ABC):
    @abstractmethod
    async def resolve(self) -> Credentials:
        """Resolve and return catalog API credentials."""
