"""Environment credential resolver."""

from __future__ import annotations

import os

from catalogsync.auth.base import CredentialResolver, Credentials
from catalogsync.contracts.exceptions import AuthenticationError

PUBLIC_KEY_ENV = "CATALOGSYNC_PUBLIC_KEY"
PRIVATE_KEY_ENV = "CATALOGSYNC_PRIVATE_KEY"


class EnvCredentialResolver(CredentialResolver):
    async def resolve(self) -> Credentials:
        public_key = (os.getenv(PUBLIC_KEY_ENV) or "").strip()
        private_key = (os.getenv(PRIVATE_KEY_ENV) or "").strip()
        missing = [name for name, value in ((PUBLIC_KEY_ENV, public_key), (PRIVATE_KEY_ENV, private_key)) if not value]
        if missing:
            raise AuthenticationError(f"{', '.join(missing)} not set or empty")
        return Credentials(public_key=public_key, private_key=private_key)
