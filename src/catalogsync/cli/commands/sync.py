"""Sync command formatting."""

from __future__ import annotations

import argparse

from catalogsync import CatalogSyncConfig, SyncError, SyncResult, SyncStatus
from catalogsync.cli.progress.rich import RichSyncProgress


def format_sync_summary(result: SyncResult, config: CatalogSyncConfig) -> str:
    lines = [
        "",
        f"catalogsync - sync {result.status.value}",
        "",
        f"  Source:    {config.source}",
        f"  Store:     {config.store_path}",
    ]

    if result.busy:
        lines.append("  Status:    another sync is already running, nothing done")
        lines.append("")
        return "\n".join(lines)

    if result.watermark is not None:
        lines.append(f"  Watermark: {result.watermark.isoformat(sep=' ')}")
    lines.append("")
    lines.append(f"  Deleted:   {result.deleted}")
    lines.append(f"  Fetched:   {result.fetched}")
    lines.append(f"  Applied:   {result.applied}")
    skipped = result.fetched - result.applied
    if result.ok and skipped > 0:
        lines.append(f"  Skipped:   {skipped} (malformed)")
    if result.ok and result.fetched == 0 and result.deleted == 0:
        lines.append("  Status:    cache up to date")
    if not result.ok:
        phase = result.failed_phase.value if result.failed_phase is not None else "unknown"
        lines.append(f"  Failed:    while {phase}: {result.error}")

    lines.append("")
    return "\n".join(lines)


async def run_sync(args: argparse.Namespace) -> SyncResult:
    import catalogsync.cli as cli

    config = cli.load_config(args.config)

    if not args.verbose:
        with RichSyncProgress() as progress:
            catalog = await cli.CatalogSync.from_config(config, progress=progress)
            async with catalog:
                result = await catalog.sync()
    else:
        catalog = await cli.CatalogSync.from_config(config)
        async with catalog:
            result = await catalog.sync()

    print(cli._format_summary(result, config))
    if result.status is SyncStatus.FAILED:
        raise SyncError(result.error or "sync failed")
    return result


__all__ = ["format_sync_summary", "run_sync"]
