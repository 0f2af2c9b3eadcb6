"""Removal of common company suffixes such as INC. and LLC from names."""

from __future__ import annotations

import re

# Order matters: at each position the earliest listed suffix wins.
_SUFFIX_REPLACEMENTS = (
    (" CO.", ""),
    (" D.O.O.", ""),
    (" INC.", ""),
    (" GMBH", ""),
    (" LLC", ""),
    (" L.L.C.", ""),
    (" LLP", ""),
    (" LTD.", ""),
    (" LTD ", " "),
    (", LTD", ""),
    (" LTDA.", ""),
    (" SA DE CV", ""),
)

_REPLACEMENTS = dict(_SUFFIX_REPLACEMENTS)
_PATTERN = re.compile("|".join(re.escape(old) for old, _ in _SUFFIX_REPLACEMENTS))


def remove_company_titles(s: str) -> str:
    """Strip company designations (CO., INC., LLC, LTD. and the like) from ``s``."""
    return _PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], s)