"""Download configuration and the interval between list refreshes."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from fractions import Fraction

DEFAULT_REFRESH_INTERVAL = 12 * 60 * 60.0

_UNIT_NANOS = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_SEGMENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|\u00b5s|\u03bcs|ms|s|m|h)")
_MAX_NANOS = (1 << 63) - 1


@dataclass
class DownloadConfig:
    """Settings for downloading and refreshing sanctions lists.

    ``refresh_interval`` is in seconds; zero means the default of 12 hours.
    ``error_on_empty_list`` makes an empty parsed list an error.
    """

    refresh_interval: float = 0.0
    initial_data_directory: str = ""
    error_on_empty_list: bool = False
    included_lists: list[str] = field(default_factory=list)


def parse_duration(text: str) -> float:
    """Parse a duration such as "1h30m" or "300ms" into seconds.

    Raises ValueError for malformed input.
    """
    s = text
    negative = False
    if s[:1] in ("+", "-"):
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return 0.0
    if not s:
        raise ValueError(f"invalid duration {text!r}")

    total = Fraction(0)
    pos = 0
    while pos < len(s):
        match = _SEGMENT.match(s, pos)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        total += Fraction(match.group(1)) * _UNIT_NANOS[match.group(2)]
        pos = match.end()

    limit = _MAX_NANOS + 1 if negative else _MAX_NANOS
    if total > limit:
        raise ValueError(f"invalid duration {text!r}")
    nanos = int(total)
    return (-nanos if negative else nanos) / 1_000_000_000


def refresh_interval(config: DownloadConfig) -> float:
    """Seconds between refreshes: DATA_REFRESH_INTERVAL, else the config, else 12 hours."""
    override = os.environ.get("DATA_REFRESH_INTERVAL", "").strip()
    if override:
        try:
            return parse_duration(override)
        except ValueError:
            pass
    return config.refresh_interval or DEFAULT_REFRESH_INTERVAL