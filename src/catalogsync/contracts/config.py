"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class ApiSourceConfig(BaseModel):
    base_url: str
    ids_path: str = "/games/ids"
    updates_path: str = "/games/updates"
    auth: str = "env"
    public_key: str | None = None
    private_key: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_keys(self) -> ApiSourceConfig:
        if self.auth not in {"env", "token"}:
            raise ValueError("auth must be one of: env, token")
        has_keys = bool((self.public_key or "").strip() or (self.private_key or "").strip())
        if self.auth == "token" and not ((self.public_key or "").strip() and (self.private_key or "").strip()):
            raise ValueError("token auth requires non-empty public_key and private_key")
        if self.auth == "env" and has_keys:
            raise ValueError("public_key/private_key must be unset when auth is 'env'")
        return self


class CatalogSyncConfig(BaseModel):
    source: str
    api: ApiSourceConfig | None = None
    database_url: str | None = None
    table: str = Field(default="games", pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")
    store_path: Path = Path("catalog.db")
    timeout_seconds: float = Field(default=60.0, gt=0, le=600)
    max_retries: int = Field(default=3, ge=0, le=10)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_source(self) -> CatalogSyncConfig:
        if self.source == "api":
            if self.api is None:
                raise ValueError("source 'api' requires an 'api' section")
            return self
        if self.source == "database":
            if not (self.database_url or "").strip():
                raise ValueError("source 'database' requires a non-empty database_url")
            return self
        raise ValueError("source must be one of: api, database")
