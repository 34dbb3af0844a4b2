from __future__ import annotations

import os
import re
from datetime import datetime, timezone
from typing import Callable, Optional, Protocol

# {UtcDate:%Y-%m-%d}
UTC_DATE_TOKEN = re.compile(r"\{UtcDate:([^}]+)\}")


class TokenExpander(Protocol):
    """
    Turns a directory template into a concrete path.

    - is_tokenised() tells whether expand() may vary between calls
    - expand() resolves the template against the current context
    """

    def is_tokenised(self, template: str) -> bool: ...

    def expand(self, template: str) -> str: ...


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UtcDateTokenExpander:
    """
    Expands ``{UtcDate:<strftime format>}`` tokens with the current UTC time.

    Environment variables and a leading ``~`` are expanded first. They are
    fixed for the lifetime of the process, but a date token they bring in
    still makes the template tokenised.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or _utc_now

    def _expand_fixed(self, template: str) -> str:
        return os.path.expanduser(os.path.expandvars(template))

    def is_tokenised(self, template: str) -> bool:
        return bool(UTC_DATE_TOKEN.search(self._expand_fixed(template)))

    def expand(self, template: str) -> str:
        expanded = self._expand_fixed(template)
        if not UTC_DATE_TOKEN.search(expanded):
            return expanded

        now = self._clock()
        return UTC_DATE_TOKEN.sub(lambda m: now.strftime(m.group(1)), expanded)


DEFAULT_TOKEN_EXPANDER = UtcDateTokenExpander()
