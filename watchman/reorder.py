"""Reordering of "Surname, Given Names" into "Given Names Surname"."""

from __future__ import annotations

from collections.abc import Iterable

import regex

# A comma, optional whitespace, then letters, marks, apostrophes, hyphens,
# dots and whitespace until the end of the string.
_SURNAME_PRECEDES = regex.compile(
    r",(?:[\t\n\f\r ]+)?([\p{L}\p{M}'\u2019\-.\t\n\f\r ]+)\Z"
)


def reorder_sdn_names(names: Iterable[str], sdn_type: str) -> list[str]:
    """Apply :func:`reorder_sdn_name` to every name."""
    return [reorder_sdn_name(name, sdn_type) for name in names]


def reorder_sdn_name(name: str, sdn_type: str) -> str:
    """Reorder "Surname, Given" to "Given Surname" for individuals; leave others alone."""
    if sdn_type.casefold() != "individual":
        return name

    match = _SURNAME_PRECEDES.search(name)
    if match is None:
        return name

    given_names = match.group(1).strip()
    surname = name[: match.start()].strip()
    return f"{given_names} {surname}".strip()