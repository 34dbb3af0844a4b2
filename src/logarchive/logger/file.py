from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

from logarchive.archive.hooks import FileLifecycleHooks

LOG_FORMAT = "%(asctime)s | [%(levelname)s] | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def build_file_handler(logfile: Path) -> logging.FileHandler:
    logfile.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(logfile, encoding="utf-8")
    handler.setLevel(logging.NOTSET)
    handler.setFormatter(_formatter())
    return handler


def repoint_file_handler(handler: logging.FileHandler, new_logfile: Path) -> None:
    new_logfile.parent.mkdir(parents=True, exist_ok=True)

    handler.acquire()
    try:
        handler.close()
        handler.baseFilename = str(new_logfile)
        handler.stream = handler._open()
    finally:
        handler.release()


class ArchivingTimedRotatingFileHandler(TimedRotatingFileHandler):
    """
    TimedRotatingFileHandler that lets lifecycle hooks see every expiring
    backup before rollover deletes it. Archives the hooks leave next to the
    log are not backups and are left alone.

    If a hook raises, the rollover deletes nothing and the error goes
    through the usual handleError() path.
    """

    def __init__(
        self,
        filename: Path | str,
        *args,
        hooks: Optional[FileLifecycleHooks] = None,
        **kwargs,
    ):
        kwargs.setdefault("encoding", "utf-8")
        super().__init__(filename, *args, **kwargs)
        self.hooks = hooks or FileLifecycleHooks()
        self.setFormatter(_formatter())

    def _archive_suffix(self) -> str:
        config = getattr(self.hooks, "config", None)
        return config.archive_suffix if config is not None else ""

    def getFilesToDelete(self) -> list[str]:
        # With backupCount=0 the base class lists every backup it recognises;
        # archives written beside the log match its pattern too and must not
        # be counted, re-archived or deleted by rollover.
        keep = self.backupCount
        self.backupCount = 0
        try:
            candidates = super().getFilesToDelete()
        finally:
            self.backupCount = keep

        suffix = self._archive_suffix()
        backups = sorted(p for p in candidates if not (suffix and p.endswith(suffix)))
        expiring = backups[: max(0, len(backups) - keep)]

        for path in expiring:
            self.hooks.on_file_deleting(path)
        return expiring
