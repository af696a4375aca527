"""Remote source adapters."""

from catalogsync.sources.database import DatabaseCatalogSource
from catalogsync.sources.factory import create_source, register
from catalogsync.sources.http import HttpCatalogSource

__all__ = ["DatabaseCatalogSource", "HttpCatalogSource", "create_source", "register"]
