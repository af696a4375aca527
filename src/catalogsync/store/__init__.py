from catalogsync.store.sqlite import SqliteCatalogStore

__all__ = ["SqliteCatalogStore"]
