from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from logarchive.archive.errors import ArchiveConfigError
from logarchive.archive.tokens import DEFAULT_TOKEN_EXPANDER, TokenExpander

GZIP_SUFFIX = ".gz"


class CompressionLevel(str, Enum):
    NO_COMPRESSION = "none"
    FASTEST = "fastest"
    OPTIMAL = "optimal"
    SMALLEST_SIZE = "smallest"

    @property
    def gzip_level(self) -> int:
        return _GZIP_LEVELS[self]

    @classmethod
    def parse(cls, value: "str | CompressionLevel") -> "CompressionLevel":
        if isinstance(value, CompressionLevel):
            return value

        key = str(value).strip().lower().replace("-", "_")
        if key not in _ALIASES:
            choices = ", ".join(level.value for level in cls)
            raise ArchiveConfigError(
                f"Unknown compression level: {value!r} (expected one of: {choices})"
            )
        return _ALIASES[key]


_GZIP_LEVELS = {
    CompressionLevel.NO_COMPRESSION: 0,
    CompressionLevel.FASTEST: 1,
    CompressionLevel.OPTIMAL: 6,
    CompressionLevel.SMALLEST_SIZE: 9,
}

_ALIASES = {
    "none": CompressionLevel.NO_COMPRESSION,
    "nocompression": CompressionLevel.NO_COMPRESSION,
    "no_compression": CompressionLevel.NO_COMPRESSION,
    "fastest": CompressionLevel.FASTEST,
    "optimal": CompressionLevel.OPTIMAL,
    "smallest": CompressionLevel.SMALLEST_SIZE,
    "smallest_size": CompressionLevel.SMALLEST_SIZE,
}


@dataclass(frozen=True)
class ArchiveConfiguration:
    """
    Immutable archive settings, validated once and shared by every call.

    - target_directory=None archives next to the source file
    - retained_file_count_limit=None disables pruning
    """

    compression_level: CompressionLevel = CompressionLevel.FASTEST
    target_directory: Optional[str] = None
    retained_file_count_limit: Optional[int] = None
    token_expander: TokenExpander = field(
        default=DEFAULT_TOKEN_EXPANDER, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "compression_level", CompressionLevel.parse(self.compression_level)
        )

        limit = self.retained_file_count_limit
        if limit is not None:
            if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
                raise ArchiveConfigError(
                    "retained_file_count_limit must be greater than zero"
                )
            if self.is_target_tokenised:
                raise ArchiveConfigError(
                    "target_directory must not be tokenised when using "
                    "retained_file_count_limit"
                )

        if not self.is_compressed and self.target_directory is None:
            raise ArchiveConfigError(
                "Either compression_level or target_directory must be set"
            )

    @property
    def is_compressed(self) -> bool:
        return self.compression_level is not CompressionLevel.NO_COMPRESSION

    @property
    def is_target_tokenised(self) -> bool:
        return self.target_directory is not None and self.token_expander.is_tokenised(
            self.target_directory
        )

    @property
    def prunes_archives(self) -> bool:
        # A tokenised directory changes between calls, so there is no single
        # place to count archives in.
        return self.retained_file_count_limit is not None and not self.is_target_tokenised

    @property
    def archive_suffix(self) -> str:
        return GZIP_SUFFIX if self.is_compressed else ""
