"""Split a single line into table cells.

Only as much markdown is understood as needed to find the column
separators: backslash escapes and inline code spans. A pipe inside a code
span or written as ``\\|`` is cell content, every other pipe separates
columns.
"""

from __future__ import annotations

from mdfmt.types import Cell, Row

_CELL_PADDING = " \t"


def _backtick_run(line: str, start: int) -> int:
    """Length of the run of backticks starting at ``start``."""
    end = start
    while end < len(line) and line[end] == "`":
        end += 1
    return end - start


def _find_closing_run(line: str, start: int, length: int) -> int | None:
    """Find a backtick run of exactly ``length`` at or after ``start``.

    Returns the index just past the closing run, or None if the code span
    is never closed.
    """
    i = start
    while i < len(line):
        if line[i] == "`":
            run = _backtick_run(line, i)
            if run == length:
                return i + run
            i += run
        else:
            i += 1
    return None


def find_separators(line: str) -> list[int]:
    """Return the indexes of every pipe that separates columns."""
    separators: list[int] = []
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            # Escaped character, including an escaped pipe or backslash
            i += 2
        elif char == "`":
            run = _backtick_run(line, i)
            closing = _find_closing_run(line, i + run, run)
            i = closing if closing is not None else i + run
        elif char == "|":
            separators.append(i)
            i += 1
        else:
            i += 1
    return separators


def is_table_row(line: str) -> bool:
    """True when the line holds at least one column separator."""
    return bool(find_separators(line))


def split_row(line: str) -> list[str] | None:
    """Split a line into trimmed cell texts.

    Returns None if the line is not table-shaped. The fence pipes at either
    end of the line are optional and dropped before splitting.
    """
    stripped = line.strip(_CELL_PADDING)
    separators = find_separators(stripped)
    if not separators:
        return None

    start = 0
    end = len(stripped)
    if separators[0] == 0:
        start = 1
        separators = separators[1:]
    if separators and separators[-1] == len(stripped) - 1:
        end = len(stripped) - 1
        separators = separators[:-1]

    bounds = [start - 1, *separators, end]
    return [
        stripped[left + 1 : right].strip(_CELL_PADDING)
        for left, right in zip(bounds, bounds[1:], strict=False)
    ]


def parse_row(line: str, line_no: int = 0) -> Row | None:
    """Parse a line into a Row, or None if it is not table-shaped."""
    texts = split_row(line)
    if texts is None:
        return None
    return Row(cells=tuple(Cell(text) for text in texts), line_no=line_no)


def unescape_pipes(text: str) -> str:
    return text.replace("\\|", "|")

