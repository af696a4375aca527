"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("catalogsync")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default="./catalogsync.json", help="Path to catalogsync.json")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catalogsync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    sync_parser = subparsers.add_parser("sync", help="Reconcile the local cache with the remote catalog")
    _add_common(sync_parser)

    search_parser = subparsers.add_parser("search", help="Search the local cache")
    _add_common(search_parser)
    search_parser.add_argument("keywords", nargs="*", help="Keywords; every keyword must match")
    search_parser.add_argument("--limit", type=int, default=50, help="Maximum rows (default: 50)")
    search_parser.add_argument("--offset", type=int, default=0, help="Rows to skip (default: 0)")
    search_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    show_parser = subparsers.add_parser("show", help="Show one cached record")
    _add_common(show_parser)
    show_parser.add_argument("record_id", type=int, help="Record identifier")
    show_parser.add_argument("--json", action="store_true", help="Print JSON")

    link_parser = subparsers.add_parser("link", help="Attach a resolved download link to a cached record")
    _add_common(link_parser)
    link_parser.add_argument("record_id", type=int, help="Record identifier")
    link_parser.add_argument("url", nargs="?", default="", help="Link to store; omit to clear")

    return parser


__all__ = ["build_parser"]
