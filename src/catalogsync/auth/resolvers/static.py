"""Static credential resolver."""

from __future__ import annotations

from dataclasses import dataclass, field

from catalogsync.auth.base import CredentialResolver, Credentials
from catalogsync.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class StaticCredentialResolver(CredentialResolver):
    public_key: str
    private_key: str = field(repr=False)

    async def resolve(self) -> Credentials:
        public_key = self.public_key.strip()
        private_key = self.private_key.strip()
        if not public_key or not private_key:
            raise AuthenticationError("Static credentials are empty")
        return Credentials(public_key=public_key, private_key=private_key)
