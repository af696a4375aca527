from catalogsync.cli.progress.rich import RichSyncProgress

__all__ = ["RichSyncProgress"]
