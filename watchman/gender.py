"""Normalisation of free-text gender values."""

from __future__ import annotations

_MALE = frozenset({"m", "male", "man", "guy"})
_FEMALE = frozenset({"f", "female", "woman", "gal", "girl"})


def normalize_gender(value: str) -> str:
    """Return "male", "female" or "unknown" for a free-text gender value."""
    v = value.strip().lower()
    if v in _MALE:
        return "male"
    if v in _FEMALE:
        return "female"
    return "unknown"