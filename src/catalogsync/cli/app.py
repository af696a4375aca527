"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from catalogsync import AuthenticationError, ConfigError, SourceError, StoreError, SyncError


def main(argv: list[str] | None = None) -> int:
    import catalogsync.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    runners = {
        "sync": cli._run_sync,
        "search": cli._run_search,
        "show": cli._run_show,
        "link": cli._run_link,
    }

    try:
        cli.asyncio.run(runners[args.command](args))
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, SourceError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (StoreError, SyncError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
