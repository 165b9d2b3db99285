"""Shared types for mdfmt."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel

# Measures how many fixed-width rendering columns a string occupies
WidthFunction = Callable[[str], int]

# ── Enums ──


class Alignment(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    DEFAULT = "default"


class ScanState(StrEnum):
    SCANNING = "scanning"
    IN_TABLE = "in_table"
    IN_FENCE = "in_fence"


# ── Table model ──


@dataclass(frozen=True)
class Cell:
    """One table cell.

    ``text`` is the cell as written in the source (escapes intact, surrounding
    whitespace trimmed); it is also what gets rendered back out.
    """

    text: str = ""

    @property
    def content(self) -> str:
        """Cell text with escaped pipes turned back into literal pipes."""
        from mdfmt.tables.row_parser import unescape_pipes

        return unescape_pipes(self.text)


@dataclass(frozen=True)
class Row:
    """Cells parsed from a single source line."""

    cells: tuple[Cell, ...] = ()
    line_no: int = 0

    def __len__(self) -> int:
        return len(self.cells)


@dataclass(frozen=True)
class TableBlock:
    """Header, per-column alignment and body rows of one table."""

    header: Row
    alignment: tuple[Alignment, ...]
    body: tuple[Row, ...] = field(default_factory=tuple)

    @property
    def column_count(self) -> int:
        return len(self.alignment)

    @property
    def line_count(self) -> int:
        """Number of source lines the block spans (header + delimiter + body)."""
        return len(self.body) + 2


@dataclass(frozen=True)
class PassThrough:
    """A document line outside any table, emitted unchanged."""

    line: str
    line_no: int = 0


Segment = PassThrough | TableBlock


# ── Results ──


class FormatResult(BaseModel):
    """Outcome of formatting one document."""

    text: str
    changed: bool = False
    tables: int = 0
    source: Path | None = None
    destination: Path | None = None
