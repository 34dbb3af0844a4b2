from __future__ import annotations


class ArchiveError(Exception):
    """Base error for the archive pipeline."""


class ArchiveConfigError(ArchiveError, ValueError):
    """Archive settings are inconsistent; the hooks can never be used."""
