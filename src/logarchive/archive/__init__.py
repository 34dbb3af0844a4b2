from __future__ import annotations

from logarchive.archive.config import ArchiveConfiguration, CompressionLevel
from logarchive.archive.errors import ArchiveConfigError, ArchiveError
from logarchive.archive.hooks import ArchiveHooks, FileLifecycleHooks
from logarchive.archive.pruner import (
    base_name_of,
    prune_archives,
    rank_archives,
    recency_key,
    select_excess,
)
from logarchive.archive.resolver import ResolvedDestination, resolve_destination
from logarchive.archive.tokens import TokenExpander, UtcDateTokenExpander

__all__ = [
    "ArchiveConfigError",
    "ArchiveConfiguration",
    "ArchiveError",
    "ArchiveHooks",
    "CompressionLevel",
    "FileLifecycleHooks",
    "ResolvedDestination",
    "TokenExpander",
    "UtcDateTokenExpander",
    "base_name_of",
    "prune_archives",
    "rank_archives",
    "recency_key",
    "resolve_destination",
    "select_excess",
]
