from catalogsync.sources.http.source import HttpCatalogSource

__all__ = ["HttpCatalogSource"]
