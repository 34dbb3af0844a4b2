from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from logarchive.archive.config import GZIP_SUFFIX
from logarchive.archive.resolver import PathLike
from logarchive.archive.state import ARCHIVE_LOCK

logger = logging.getLogger(__name__)


def base_name_of(source_path: PathLike) -> str:
    """
    Logical stream name of a rotated file: the name without its last
    extension, cut at the first underscore.

        svc_2024-01-04.log -> svc
    """
    return Path(source_path).stem.split("_", 1)[0]


def recency_key(path: Path) -> tuple[int, str]:
    """
    Sort key approximating chronological order from the file name alone.

    Longer names are newer; equal lengths compare ordinal and
    case-insensitive. Only correct for names whose timestamp sorts
    lexicographically (ISO 8601 and friends).
    """
    return len(path.name), path.name.upper()


def _iter_candidates(directory: Path, compressed: bool) -> Iterable[Path]:
    for p in directory.iterdir():
        if not p.is_file():
            continue
        if compressed and not p.name.endswith(GZIP_SUFFIX):
            continue
        yield p


def rank_archives(
    directory: PathLike, source_path: PathLike, compressed: bool
) -> list[Path]:
    """
    Archives in `directory` sharing the base name of `source_path`,
    newest first.
    """
    base = base_name_of(source_path)
    matches = [
        p for p in _iter_candidates(Path(directory), compressed) if p.stem.startswith(base)
    ]
    return sorted(matches, key=recency_key, reverse=True)


def select_excess(ranked: list[Path], limit: int) -> list[Path]:
    return ranked[limit:]


def prune_archives(
    directory: PathLike, source_path: PathLike, limit: int, compressed: bool
) -> list[Path]:
    """
    Delete every archive of the same stream beyond the `limit` newest.

    Deletions are best effort: a file that cannot be removed is logged and
    skipped. Returns the paths actually deleted.
    """
    removed: list[Path] = []

    with ARCHIVE_LOCK:
        excess = select_excess(rank_archives(directory, source_path, compressed), limit)

        for archived in excess:
            try:
                archived.unlink()
            except OSError as e:
                logger.error(f"Error while deleting file {archived}: {e}")
            else:
                removed.append(archived)

    if removed:
        logger.debug(f"Pruned {len(removed)} archive(s) from {directory}")
    return removed
