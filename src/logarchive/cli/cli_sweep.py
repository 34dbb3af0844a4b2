from __future__ import annotations

import argparse
from pathlib import Path

from logarchive.cli.common import add_archive_options, add_output_options, hooks_from_args
from logarchive.logger import enforce_retention, get_logger

logger = get_logger(__name__)


def build_sweep_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "sweep",
        help="Keep the newest N files of a directory, archiving the rest before deleting them",
    )
    p.add_argument("dir", help="Directory holding rotated log files")
    p.add_argument("--keep", type=int, required=True, help="Files to keep (newest by mtime)")
    p.add_argument("--pattern", default="*.log", help="Glob selecting the files (default: *.log)")
    add_archive_options(p)
    add_output_options(p)
    p.set_defaults(action="sweep")


def handle_sweep(args: argparse.Namespace) -> int:
    directory = Path(args.dir)
    if not directory.is_dir():
        logger.error(f"Directory not found: {directory}")
        return 1

    hooks = hooks_from_args(args)
    try:
        removed = enforce_retention(directory, args.keep, pattern=args.pattern, hooks=hooks)
    except Exception:
        # the failing file stays in place; the hooks already logged why
        return 1

    logger.info(f"Archived and deleted {len(removed)} file(s) from {directory}")
    return 0
