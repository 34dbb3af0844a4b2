from __future__ import annotations

import gzip
import logging
import shutil
from pathlib import Path
from typing import Optional

from logarchive.archive.config import ArchiveConfiguration, CompressionLevel
from logarchive.archive.pruner import prune_archives
from logarchive.archive.resolver import PathLike, ResolvedDestination, resolve_destination
from logarchive.archive.state import ARCHIVE_LOCK
from logarchive.archive.tokens import TokenExpander

logger = logging.getLogger(__name__)


class FileLifecycleHooks:
    """
    Callbacks a log retention mechanism invokes around the files it manages.

    on_file_deleting() is called synchronously right before `path` is
    removed. Raising from it aborts the deletion.
    """

    def on_file_deleting(self, path: PathLike) -> object:
        return None


class ArchiveHooks(FileLifecycleHooks):
    """
    Archives log files before a retention mechanism deletes them, copying
    them to another location and optionally gzip-compressing them.
    """

    def __init__(
        self,
        config: Optional[ArchiveConfiguration] = None,
        *,
        compression_level: CompressionLevel | str = CompressionLevel.FASTEST,
        target_directory: Optional[str] = None,
        retained_file_count_limit: Optional[int] = None,
        token_expander: Optional[TokenExpander] = None,
    ):
        if config is None:
            kwargs = {}
            if token_expander is not None:
                kwargs["token_expander"] = token_expander
            config = ArchiveConfiguration(
                compression_level=compression_level,
                target_directory=target_directory,
                retained_file_count_limit=retained_file_count_limit,
                **kwargs,
            )
        self.config = config

    @classmethod
    def from_env(cls) -> "ArchiveHooks":
        from logarchive.env import get_env

        return cls(get_env().archive_config())

    def on_file_deleting(self, path: PathLike) -> ResolvedDestination:
        try:
            destination = resolve_destination(path, self.config)

            with ARCHIVE_LOCK:
                destination.target_directory.mkdir(parents=True, exist_ok=True)

                if self.config.is_compressed:
                    self._compress(Path(path), destination.target_path)
                else:
                    shutil.copyfile(path, destination.target_path)

                if self.config.prunes_archives:
                    prune_archives(
                        destination.target_directory,
                        path,
                        self.config.retained_file_count_limit,
                        self.config.is_compressed,
                    )
        except Exception as e:
            logger.error(f"Error while archiving file {path}: {e}")
            raise

        logger.debug(f"Archived {path} -> {destination.target_path}")
        return destination

    def _compress(self, source: Path, target: Path) -> None:
        level = self.config.compression_level.gzip_level
        with source.open("rb") as f_in, gzip.open(
            target, "wb", compresslevel=level
        ) as f_out:
            shutil.copyfileobj(f_in, f_out)
