"""Lower-casing, punctuation removal and accent stripping for names."""

from __future__ import annotations

import unicodedata

_PUNCTUATION_TO_SPACE = str.maketrans({".": " ", ",": " ", "-": " "})
_EXTRA_SPACES = "\t\n\v\f\r\x85"


def _is_space(ch: str) -> bool:
    return ch in _EXTRA_SPACES or unicodedata.category(ch).startswith("Z")


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    kept = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", kept)


def lower_and_remove_punctuation(s: str) -> str:
    """Lower-case ``s``, turn punctuation and symbols into single spaces and strip accents.

    Letters and digits are kept, runs of whitespace or punctuation collapse to one
    space, and everything else is dropped.
    """
    lowered = s.translate(_PUNCTUATION_TO_SPACE).lower()

    parts: list[str] = []
    last_was_space = True
    for ch in lowered:
        category = unicodedata.category(ch)
        if category[0] in "PS" or _is_space(ch):
            if not last_was_space:
                parts.append(" ")
                last_was_space = True
            continue
        if category[0] in "LN":
            parts.append(ch)
            last_was_space = False

    return _strip_accents("".join(parts).strip(" "))