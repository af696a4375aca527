"""Credential resolver factory."""

from __future__ import annotations

from catalogsync.auth.base import CredentialResolver
from catalogsync.auth.resolvers.env import EnvCredentialResolver
from catalogsync.auth.resolvers.static import StaticCredentialResolver
from catalogsync.contracts.config import ApiSourceConfig
from catalogsync.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[CredentialResolver]] = {
    "env": EnvCredentialResolver,
    "token": StaticCredentialResolver,
}


def create_credential_resolver(config: ApiSourceConfig) -> CredentialResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "env":
        return EnvCredentialResolver()
    return StaticCredentialResolver(public_key=config.public_key or "", private_key=config.private_key or "")
