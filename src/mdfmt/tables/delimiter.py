"""Recognize the delimiter row under a table header."""

from __future__ import annotations

import re

from mdfmt.types import Alignment, Row

_DELIMITER_CELL = re.compile(r"(:?)-+(:?)")

_ALIGNMENTS: dict[tuple[bool, bool], Alignment] = {
    (False, False): Alignment.DEFAULT,
    (True, False): Alignment.LEFT,
    (False, True): Alignment.RIGHT,
    (True, True): Alignment.CENTER,
}


def classify_cell(text: str) -> Alignment | None:
    """Alignment encoded by one delimiter cell, or None if it is not one."""
    match = _DELIMITER_CELL.fullmatch(text.strip())
    if match is None:
        return None
    return _ALIGNMENTS[(bool(match.group(1)), bool(match.group(2)))]


def classify_delimiter(row: Row | None) -> tuple[Alignment, ...] | None:
    """Per-column alignment of a delimiter row.

    Returns None when any cell fails to match ``:?-+:?``; the number of
    cells becomes the column count of the whole table.
    """
    if row is None or not row.cells:
        return None

    alignment: list[Alignment] = []
    for cell in row.cells:
        value = classify_cell(cell.text)
        if value is None:
            return None
        alignment.append(value)
    return tuple(alignment)
