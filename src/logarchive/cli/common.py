from __future__ import annotations

import argparse
from typing import Optional

from rich.console import Console
from rich.table import Table

from logarchive.archive import ArchiveConfiguration, ArchiveHooks, CompressionLevel
from logarchive.env import get_env

CONSOLE = Console(soft_wrap=True)


# ----------------------------
# Help dispatch (subparser-local)
# ----------------------------


def dispatch_subparser_help(
    parser: argparse.ArgumentParser, path: list[str] | None
) -> int:
    """
    Implements consistent `X help [subcmd ...]` behavior for a subtree parser.
    """
    if not path:
        parser.print_help()
        return 0

    try:
        parser.parse_args(path + ["--help"])
    except SystemExit:
        pass
    return 0


# ----------------------------
# Archive options (flags override env)
# ----------------------------


def add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--verbose", action="store_true", help="Verbose console output")
    parser.add_argument("--quiet", action="store_true", help="Suppress console output")


def add_archive_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--compression",
        choices=[level.value for level in CompressionLevel],
        help="Compression level (default: LOGARCHIVE_COMPRESSION or fastest)",
    )
    parser.add_argument(
        "--target-dir",
        help="Archive directory, may contain {UtcDate:<format>} tokens "
        "(default: LOGARCHIVE_TARGET_DIR or the source directory)",
    )
    parser.add_argument(
        "--retain",
        type=int,
        help="Archives to keep per stream, 0 keeps all "
        "(default: LOGARCHIVE_RETAINED_FILE_COUNT)",
    )


def _pick(value, fallback):
    return fallback if value is None else value


def archive_config_from_args(args: argparse.Namespace) -> ArchiveConfiguration:
    env = get_env()
    retain: Optional[int] = _pick(getattr(args, "retain", None), env.retained_file_count_limit)
    # 0 means "no pruning", as in LOGARCHIVE_RETAINED_FILE_COUNT
    if retain == 0:
        retain = None

    return ArchiveConfiguration(
        compression_level=_pick(getattr(args, "compression", None), env.compression_level),
        target_directory=_pick(getattr(args, "target_dir", None), env.target_directory),
        retained_file_count_limit=retain,
    )


def hooks_from_args(args: argparse.Namespace) -> ArchiveHooks:
    return ArchiveHooks(archive_config_from_args(args))


# ----------------------------
# CLI output helpers
# ----------------------------


def print_table(headers: list[str], rows: list[list[str]], title: str | None = None) -> None:
    if not rows:
        CONSOLE.print("(no results)")
        return

    table = Table(title=title)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(str(c) for c in row))
    CONSOLE.print(table)
