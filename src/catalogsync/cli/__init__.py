"""Command-line interface for catalogsync."""

from __future__ import annotations

import asyncio
import logging as logging

from catalogsync import CatalogSync as CatalogSync
from catalogsync import load_config as load_config
from catalogsync.cli.app import main as main
from catalogsync.cli.commands import records as records_command
from catalogsync.cli.commands import sync as sync_command
from catalogsync.cli.parser import build_parser as build_parser

_format_summary = sync_command.format_sync_summary

_run_sync = sync_command.run_sync
_run_search = records_command.run_search
_run_show = records_command.run_show
_run_link = records_command.run_link

__all__ = ["CatalogSync", "asyncio", "build_parser", "load_config", "main"]
