"""
logarchive: archive rotated log files right before a retention policy
deletes them, optionally gzip-compressed, with count-based retention over
the archived copies.
"""
from __future__ import annotations

from logarchive.archive import (
    ArchiveConfigError,
    ArchiveConfiguration,
    ArchiveError,
    ArchiveHooks,
    CompressionLevel,
    FileLifecycleHooks,
    TokenExpander,
    UtcDateTokenExpander,
)

__version__ = "0.1.0"

__all__ = [
    "ArchiveConfigError",
    "ArchiveConfiguration",
    "ArchiveError",
    "ArchiveHooks",
    "CompressionLevel",
    "FileLifecycleHooks",
    "TokenExpander",
    "UtcDateTokenExpander",
    "__version__",
]
