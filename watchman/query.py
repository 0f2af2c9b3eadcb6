"""Parsing of search request query values: limits, dates, numbers and addresses."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

SOFT_RESULTS_LIMIT = 10
HARD_RESULTS_LIMIT = 100

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_BITS = 20
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

# Accepted date layouts, tried in order: year-month-day, year-month, year.
_DATE_PATTERNS = (
    re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})"),
    re.compile(r"([0-9]{4})-([0-9]{2})"),
    re.compile(r"([0-9]{4})"),
)


@dataclass(frozen=True)
class CryptoAddress:
    """A cryptocurrency address with its currency code."""

    currency: str
    address: str


def _parse_plain_int(value: str) -> Optional[int]:
    if _INT_PATTERN.fullmatch(value) is None:
        return None
    return int(value, 10)


def extract_search_limit(value: Optional[str]) -> int:
    """Number of results to return: positive values up to 100, otherwise 10."""
    limit = SOFT_RESULTS_LIMIT
    if value:
        n = _parse_plain_int(value)
        if n is not None and n > 0:
            limit = n
    if limit > HARD_RESULTS_LIMIT:
        limit = HARD_RESULTS_LIMIT
    if limit < 0:
        limit = SOFT_RESULTS_LIMIT
    return limit


def extract_search_min_match(value: Optional[str]) -> float:
    """Minimum match score requested, or 0.0 when absent or unparsable."""
    if not value:
        return 0.0
    if value != value.strip() or "_" in value:
        return 0.0
    try:
        n = float(value)
    except ValueError:
        return 0.0
    return 0.0 if math.isnan(n) and value.lower() not in ("nan", "+nan", "-nan") else n


def read_date(value: Optional[str]) -> Optional[datetime]:
    """Parse "YYYY-MM-DD", "YYYY-MM" or "YYYY" as a UTC midnight, or return None."""
    if not value:
        return None
    for pattern in _DATE_PATTERNS:
        match = pattern.fullmatch(value)
        if match is None:
            continue
        parts = [int(group) for group in match.groups()]
        year = parts[0]
        month = parts[1] if len(parts) > 1 else 1
        day = parts[2] if len(parts) > 2 else 1
        try:
            return datetime(year, month, day, tzinfo=timezone.utc)
        except ValueError:
            continue
    return None


def read_int(value: str) -> int:
    """Parse a base-10 integer that fits in 20 signed bits.

    Raises ValueError when the text is not an integer or is out of range.
    """
    n = _parse_plain_int(value)
    if n is None:
        raise ValueError(f"invalid integer {value!r}")
    if n < _INT_MIN or n > _INT_MAX:
        raise ValueError(f"integer {value!r} out of range")
    return n


def read_strings(*args: Iterable[str]) -> list[str]:
    """Concatenate all given string lists, trimming whitespace from each item."""
    return [item.strip() for items in args for item in items]


def read_crypto_addresses(inputs: Iterable[str]) -> list[CryptoAddress]:
    """Parse "CURRENCY:address" values; anything not of exactly two parts is skipped."""
    out = []
    for value in inputs:
        parts = value.split(":")
        if len(parts) == 2:
            out.append(CryptoAddress(currency=parts[0].upper(), address=parts[1]))
    return out