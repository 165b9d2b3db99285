"""Split a line stream into pass-through lines and table blocks."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from mdfmt.tables.delimiter import classify_delimiter
from mdfmt.tables.row_parser import parse_row
from mdfmt.types import Alignment, PassThrough, Row, ScanState, Segment, TableBlock

logger = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r" {0,3}(`{3,}|~{3,})(.*)")
_FENCE_CLOSE = re.compile(r" {0,3}(`{3,}|~{3,})[ \t]*")


class LineCursor:
    """Forward-only cursor with one line of lookahead and push-back."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._buffer: list[str] = []
        self._last: str | None = None
        self.line_no = 0

    def peek(self) -> str | None:
        """Return the next line without consuming it, None at end of input."""
        if not self._buffer:
            try:
                self._buffer.append(next(self._lines))
            except StopIteration:
                return None
        return self._buffer[-1]

    def next(self) -> str | None:
        """Consume and return the next line, None at end of input."""
        if self._buffer:
            line = self._buffer.pop()
        else:
            try:
                line = next(self._lines)
            except StopIteration:
                return None
        self._last = line
        self.line_no += 1
        return line

    def push_back(self) -> None:
        """Un-consume the line most recently returned by next()."""
        if self._last is None:
            raise RuntimeError("No line to push back")
        self._buffer.append(self._last)
        self._last = None
        self.line_no -= 1


def opening_fence(line: str) -> str | None:
    """Return the fence marker if the line opens a fenced code block."""
    match = _FENCE_OPEN.fullmatch(line)
    if match is None:
        return None
    marker, info = match.groups()
    # Backtick fences cannot carry backticks in their info string
    if marker[0] == "`" and "`" in info:
        return None
    return marker


def closes_fence(line: str, marker: str) -> bool:
    """True when the line closes a block opened with ``marker``."""
    match = _FENCE_CLOSE.fullmatch(line)
    if match is None:
        return False
    closing = match.group(1)
    return closing[0] == marker[0] and len(closing) >= len(marker)


def _header_folds_into_delimiter(header: Row, delimiter: tuple[Alignment, ...]) -> bool:
    """True when the header, cut to the column count, reads as a delimiter row.

    Rendering such a header under a table-shaped line of plain text would
    turn the two into a new table the next time the document is formatted.
    """
    return classify_delimiter(Row(cells=header.cells[: len(delimiter)])) is not None


def scan(lines: Iterable[str], *, code_fences: bool = True) -> Iterator[Segment]:
    """Lazily split lines (without terminators) into segments.

    A table starts at a table-shaped line directly followed by a valid
    delimiter row and runs until the first line that is not table-shaped.
    That line is not consumed by the table; it is scanned again as ordinary
    text, so it may open the next table.
    """
    cursor = LineCursor(lines)
    state = ScanState.SCANNING
    fence = ""
    header: Row | None = None
    alignment: tuple[Alignment, ...] = ()
    body: list[Row] = []
    # Previous line was table-shaped but did not start a table
    after_plain_row = False

    while True:
        line = cursor.next()

        if state == ScanState.IN_TABLE:
            row = None
            if line is not None and not (code_fences and opening_fence(line)):
                row = parse_row(line, cursor.line_no)
            if row is not None:
                body.append(row)
                continue

            if header is not None:
                block = TableBlock(header=header, alignment=alignment, body=tuple(body))
                logger.debug(
                    "Table at line %d: %d columns, %d body rows",
                    header.line_no,
                    block.column_count,
                    len(block.body),
                )
                yield block
            state = ScanState.SCANNING
            if line is None:
                return
            cursor.push_back()
            continue

        if line is None:
            return

        if state == ScanState.IN_FENCE:
            if closes_fence(line, fence):
                state = ScanState.SCANNING
            yield PassThrough(line, cursor.line_no)
            continue

        if code_fences:
            marker = opening_fence(line)
            if marker is not None:
                fence = marker
                state = ScanState.IN_FENCE
                after_plain_row = False
                yield PassThrough(line, cursor.line_no)
                continue

        candidate = parse_row(line, cursor.line_no)
        if candidate is not None:
            lookahead = cursor.peek()
            delimiter = classify_delimiter(parse_row(lookahead)) if lookahead is not None else None
            if delimiter is not None and not (
                after_plain_row and _header_folds_into_delimiter(candidate, delimiter)
            ):
                cursor.next()
                header = candidate
                alignment = delimiter
                body = []
                state = ScanState.IN_TABLE
                after_plain_row = False
                continue

        after_plain_row = candidate is not None
        yield PassThrough(line, cursor.line_no)
