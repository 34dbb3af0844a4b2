from __future__ import annotations

import argparse
from pathlib import Path

from rich.text import Text

from logarchive.cli.common import (
    CONSOLE,
    add_archive_options,
    add_output_options,
    hooks_from_args,
)
from logarchive.logger import get_logger

logger = get_logger(__name__)


def build_archive_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "archive",
        help="Archive files as a retention policy would right before deleting them",
    )
    p.add_argument("paths", nargs="+", help="Files to archive")
    p.add_argument(
        "--delete",
        action="store_true",
        help="Delete each original after it was archived successfully",
    )
    add_archive_options(p)
    add_output_options(p)
    p.set_defaults(action="archive")


def handle_archive(args: argparse.Namespace) -> int:
    hooks = hooks_from_args(args)
    failed = 0

    for raw in args.paths:
        source = Path(raw)
        try:
            destination = hooks.on_file_deleting(source)
        except Exception:
            # already logged by the hooks; keep going with the rest
            failed += 1
            continue

        if args.delete:
            try:
                source.unlink()
            except OSError as e:
                logger.error(f"Archived {source} but could not delete it: {e}")
                failed += 1
                continue
            logger.info(f"Deleted {source}")

        if not args.quiet:
            msg = Text(f"{source} ", style="dim")
            msg.append(f"-> {destination.target_path}", style="green")
            CONSOLE.print(msg)

    if failed:
        logger.error(f"{failed} of {len(args.paths)} file(s) failed")
        return 1
    return 0
