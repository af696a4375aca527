"""Read-path commands: search, show and link."""

from __future__ import annotations

import argparse
import json

from rich.console import Console
from rich.table import Table

from catalogsync import RecordDetails, RecordSummary


def render_search_table(rows: list[RecordSummary], console: Console | None = None) -> None:
    table = Table(show_lines=False)
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Localized")
    table.add_column("Publisher")
    table.add_column("Released")
    for row in rows:
        table.add_row(str(row.id), row.title, row.title_localized, row.publisher, row.release_date)
    (console or Console()).print(table)


def format_details(details: RecordDetails) -> str:
    lines = [
        "",
        f"  #{details.id}  {details.title}",
    ]
    if details.title_localized:
        lines.append(f"  Localized: {details.title_localized}")
    lines.append(f"  Publisher: {details.publisher or '-'}")
    lines.append(f"  Released:  {details.release_date or '-'}")
    lines.append(f"  Tags:      {details.tags or '-'}")
    lines.append(f"  Updated:   {details.modified_at or '-'}")
    lines.append(f"  Link:      {details.download_link or '-'}")
    if details.synopsis:
        lines.extend(["", f"  {details.synopsis}"])
    lines.append("")
    return "\n".join(lines)


async def run_search(args: argparse.Namespace) -> list[RecordSummary]:
    import catalogsync.cli as cli

    config = cli.load_config(args.config)
    catalog = await cli.CatalogSync.from_config(config, connect=False)
    async with catalog:
        rows = await catalog.search(" ".join(args.keywords), limit=args.limit, offset=args.offset)

    if args.json:
        print(json.dumps([row.model_dump(mode="json") for row in rows], ensure_ascii=False, indent=2))
    elif rows:
        render_search_table(rows)
    else:
        print("no matching records")
    return rows


async def run_show(args: argparse.Namespace) -> RecordDetails:
    import catalogsync.cli as cli

    config = cli.load_config(args.config)
    catalog = await cli.CatalogSync.from_config(config, connect=False)
    async with catalog:
        details = await catalog.get_details(args.record_id)

    if args.json:
        print(details.model_dump_json(indent=2))
    else:
        print(format_details(details))
    return details


async def run_link(args: argparse.Namespace) -> None:
    import catalogsync.cli as cli

    config = cli.load_config(args.config)
    catalog = await cli.CatalogSync.from_config(config, connect=False)
    async with catalog:
        await catalog.set_download_link(args.record_id, args.url)

    if args.url:
        print(f"link set for record {args.record_id}")
    else:
        print(f"link cleared for record {args.record_id}")


__all__ = ["format_details", "render_search_table", "run_link", "run_search", "run_show"]
