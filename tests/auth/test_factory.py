from __future__ import annotations

import pytest

from catalogsync.auth.factory import create_credential_resolver
from catalogsync.auth.resolvers.env import EnvCredentialResolver
from catalogsync.auth.resolvers.static import StaticCredentialResolver
from catalogsync.contracts.config import ApiSourceConfig
from catalogsync.contracts.exceptions import ConfigError


def test_env_mode_creates_env_resolver() -> None:
    resolver = create_credential_resolver(ApiSourceConfig(base_url="https://catalog.test"))

    assert isinstance(resolver, EnvCredentialResolver)


def test_token_mode_creates_static_resolver() -> None:
    config = ApiSourceConfig(base_url="https://catalog.test", auth="token", public_key="pub", private_key="priv")

    resolver = create_credential_resolver(config)

    assert resolver == StaticCredentialResolver(public_key="pub", private_key="priv")


def test_unknown_mode_raises_config_error() -> None:
    config = ApiSourceConfig(base_url="https://catalog.test").model_copy(update={"auth": "oauth"})

    with pytest.raises(ConfigError, match="oauth"):
        create_credential_resolver(config)
