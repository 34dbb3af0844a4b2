from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from logarchive.archive.hooks import FileLifecycleHooks

logger = logging.getLogger(__name__)


def enforce_retention(
    log_dir: Path,
    keep: int,
    pattern: str = "*.log",
    hooks: Optional[FileLifecycleHooks] = None,
) -> list[Path]:
    """
    Delete all but the `keep` newest files (by mtime) matching `pattern`.

    Each expiring file is handed to `hooks.on_file_deleting()` first. A hook
    error stops the sweep and propagates; that file is left in place.
    """
    if keep <= 0 or not log_dir.exists():
        return []

    logs = sorted(
        (p for p in log_dir.glob(pattern) if p.is_file()),
        key=lambda p: p.stat().st_mtime,
        reverse=True,
    )

    removed: list[Path] = []
    for old in logs[keep:]:
        if hooks is not None:
            hooks.on_file_deleting(old)
        try:
            old.unlink()
        except OSError:
            logger.warning(f"Could not delete expired log {old}", exc_info=True)
        else:
            removed.append(old)
    return removed
