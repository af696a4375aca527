"""Credential resolution for the catalog API."""

from catalogsync.auth.base import CredentialResolver, Credentials
from catalogsync.auth.factory import create_credential_resolver
from catalogsync.auth.resolvers import EnvCredentialResolver, StaticCredentialResolver

__all__ = [
    "CredentialResolver",
    "Credentials",
    "EnvCredentialResolver",
    "StaticCredentialResolver",
    "create_credential_resolver",
]
