from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------
# Project root
# ---------------------------------------------------------------------

# This file lives in src/logarchive/env/, so project root is three levels up
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"


# ---------------------------------------------------------------------
# Base directories (override-friendly)
# ---------------------------------------------------------------------


def _resolve_dir(env_var: str, default: Path) -> Path:
    """
    Resolve a directory path from an environment variable or default.
    Ensures the directory exists.
    """
    raw = os.environ.get(env_var)
    path = Path(raw).expanduser().resolve() if raw else default
    path.mkdir(parents=True, exist_ok=True)
    return path


def logs_dir() -> Path:
    """
    Root of the tool's own run logs. Read at call time so tests and
    bootstrap can repoint it.
    """
    return _resolve_dir("LOGARCHIVE_LOGS_DIR", PROJECT_ROOT / "logs")


def command_logs_dir(command: str) -> Path:
    """
    Log directory for a CLI command (e.g. archive, sweep).
    """
    path = logs_dir() / command
    path.mkdir(parents=True, exist_ok=True)
    return path
