from __future__ import annotations

import argparse
from pathlib import Path

from logarchive.archive import prune_archives, rank_archives
from logarchive.cli.common import (
    add_archive_options,
    add_output_options,
    archive_config_from_args,
    print_table,
)
from logarchive.logger import get_logger

logger = get_logger(__name__)


def build_prune_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "prune",
        help="Delete archives beyond the retention limit for one log stream",
    )
    p.add_argument("dir", help="Archive directory")
    p.add_argument(
        "--source",
        required=True,
        help="A file name of the stream (e.g. svc_2024-01-04.log); "
        "everything before the first '_' selects the stream",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Only show what would be kept and deleted",
    )
    add_archive_options(p)
    add_output_options(p)
    p.set_defaults(action="prune")


def handle_prune(args: argparse.Namespace) -> int:
    config = archive_config_from_args(args)
    directory = Path(args.dir)

    if not config.prunes_archives:
        logger.error("prune needs a retention limit and a non-tokenised target directory")
        return 2
    if not directory.is_dir():
        logger.error(f"Archive directory not found: {directory}")
        return 1

    limit = config.retained_file_count_limit
    ranked = rank_archives(directory, args.source, config.is_compressed)

    if not args.quiet:
        rows = [
            [str(i + 1), p.name, "keep" if i < limit else "delete"]
            for i, p in enumerate(ranked)
        ]
        print_table(["#", "Archive", "Action"], rows, title=f"{directory} (keep {limit})")

    if args.dry_run:
        return 0

    removed = prune_archives(directory, args.source, limit, config.is_compressed)
    logger.info(f"Pruned {len(removed)} of {len(ranked)} archive(s) in {directory}")
    return 0
