from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from logarchive.archive.config import ArchiveConfiguration, CompressionLevel
from logarchive.archive.errors import ArchiveConfigError

# ------------------------------------------------------------
# Minimal dotenv loader (read-only helper, bootstrap owns usage)
# ------------------------------------------------------------


def _load_dotenv(path: Path) -> None:
    """
    Minimal dotenv loader.
    - Silent
    - Never overrides existing os.environ
    """
    if not path.exists():
        return

    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        k, v = line.split("=", 1)
        k = k.strip()
        v = v.strip()

        # strip inline comments
        if " #" in v:
            v = v.split(" #", 1)[0].rstrip()
        elif "\t#" in v:
            v = v.split("\t#", 1)[0].rstrip()

        # strip quotes
        if len(v) >= 2 and v[0] == v[-1] and v[0] in ("'", '"'):
            v = v[1:-1]

        if k and k not in os.environ:
            os.environ[k] = v


# ------------------------------------------------------------
# Errors / helpers
# ------------------------------------------------------------


class ConfigError(RuntimeError):
    pass


def _as_bool(v: str) -> bool:
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(v: str, default: int) -> int:
    try:
        return int(v)
    except Exception:
        return default


def _optional_str(name: str) -> Optional[str]:
    v = os.environ.get(name, "").strip()
    return v or None


def _optional_limit(name: str) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    # 0 means "no pruning"
    return value or None


# ------------------------------------------------------------
# Logging environment (SAFE ANYWHERE)
# ------------------------------------------------------------


@dataclass(frozen=True)
class LoggingEnvironment:
    log_level: str
    log_retention: int
    verbose: bool
    quiet: bool
    archive_own_logs: bool


def get_logging_env() -> LoggingEnvironment:
    return LoggingEnvironment(
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        log_retention=_as_int(os.environ.get("LOG_RETENTION", "30"), 30),
        verbose=_as_bool(os.environ.get("LOGARCHIVE_VERBOSE", "0")),
        quiet=_as_bool(os.environ.get("LOGARCHIVE_QUIET", "0")),
        archive_own_logs=_as_bool(os.environ.get("LOGARCHIVE_ARCHIVE_OWN_LOGS", "0")),
    )


# ------------------------------------------------------------
# Full runtime environment
# ------------------------------------------------------------


class Environment:
    def __init__(self):
        # Logging snapshot (immutable)
        self._logging = get_logging_env()

        # ---- ARCHIVE ----
        raw_level = os.environ.get("LOGARCHIVE_COMPRESSION", "fastest")
        try:
            self.compression_level = CompressionLevel.parse(raw_level)
        except ArchiveConfigError as e:
            raise ConfigError(f"LOGARCHIVE_COMPRESSION: {e}") from None

        self.target_directory = _optional_str("LOGARCHIVE_TARGET_DIR")
        self.retained_file_count_limit = _optional_limit(
            "LOGARCHIVE_RETAINED_FILE_COUNT"
        )

        # ---- RUN CONTEXT ----
        self.command = os.environ.get("LOGARCHIVE_COMMAND", "bootstrap")
        self.run_id = os.environ.get("LOGARCHIVE_RUN_ID", "")

    def archive_config(self) -> ArchiveConfiguration:
        return ArchiveConfiguration(
            compression_level=self.compression_level,
            target_directory=self.target_directory,
            retained_file_count_limit=self.retained_file_count_limit,
        )

    def as_dict(self) -> dict:
        return {
            "Logging": {
                "log_level": self.log_level,
                "log_retention": self.log_retention,
                "verbose": self.verbose,
                "quiet": self.quiet,
                "archive_own_logs": self.archive_own_logs,
            },
            "Archive": {
                "compression_level": self.compression_level.value,
                "target_directory": self.target_directory or "(source directory)",
                "retained_file_count_limit": self.retained_file_count_limit or "(none)",
            },
            "Run": {
                "command": self.command,
                "run_id": self.run_id,
            },
        }

    # ---- logging passthrough ----
    @property
    def log_level(self) -> str:
        return self._logging.log_level

    @property
    def log_retention(self) -> int:
        return self._logging.log_retention

    @property
    def verbose(self) -> bool:
        return self._logging.verbose

    @property
    def quiet(self) -> bool:
        return self._logging.quiet

    @property
    def archive_own_logs(self) -> bool:
        return self._logging.archive_own_logs


_ENV: Optional[Environment] = None


def reset_env_caches() -> None:
    """Invalidate cached views of environment variables."""
    global _ENV
    _ENV = None


def get_env() -> Environment:
    global _ENV
    if _ENV is None:
        _ENV = Environment()
    return _ENV
