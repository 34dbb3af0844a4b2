from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from logarchive.archive.config import ArchiveConfiguration

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class ResolvedDestination:
    target_directory: Path
    target_file_name: str

    @property
    def target_path(self) -> Path:
        return self.target_directory / self.target_file_name


def resolve_destination(
    source_path: PathLike, config: ArchiveConfiguration
) -> ResolvedDestination:
    """
    Compute where an expiring file is archived to.

    Does not touch the file system. A tokenised target directory is expanded
    on every call, so the result must not be cached.
    """
    source = Path(source_path)

    if config.target_directory is not None:
        target_dir = Path(config.token_expander.expand(config.target_directory))
    else:
        target_dir = source.parent

    return ResolvedDestination(
        target_directory=target_dir,
        target_file_name=source.name + config.archive_suffix,
    )
