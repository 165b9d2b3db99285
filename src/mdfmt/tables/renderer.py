"""Render a table block with padded, aligned columns."""

from __future__ import annotations

from mdfmt.tables.width import display_width
from mdfmt.types import Alignment, Cell, Row, TableBlock, WidthFunction

# Narrowest column that still fits a delimiter like ":-:"
MIN_COLUMN_WIDTH = 3


def normalize_row(row: Row, columns: int) -> tuple[Cell, ...]:
    """Pad a row with empty cells, or cut it, to exactly ``columns`` cells."""
    cells = row.cells[:columns]
    if len(cells) < columns:
        cells = cells + (Cell(),) * (columns - len(cells))
    return cells


def column_widths(block: TableBlock, width_fn: WidthFunction = display_width) -> list[int]:
    """Target width of every column, never below MIN_COLUMN_WIDTH."""
    widths = [MIN_COLUMN_WIDTH] * block.column_count
    for row in (block.header, *block.body):
        for index, cell in enumerate(normalize_row(row, block.column_count)):
            widths[index] = max(widths[index], width_fn(cell.text))
    return widths


def pad_cell(
    text: str,
    width: int,
    alignment: Alignment,
    width_fn: WidthFunction = display_width,
) -> str:
    """Pad ``text`` with spaces until it spans ``width`` rendering columns."""
    padding = max(width - width_fn(text), 0)
    if alignment == Alignment.RIGHT:
        return " " * padding + text
    if alignment == Alignment.CENTER:
        left = padding // 2
        return " " * left + text + " " * (padding - left)
    return text + " " * padding


def render_delimiter_cell(width: int, alignment: Alignment) -> str:
    """Dashes spanning the cell and its two padding spaces, colons overlaid."""
    dashes = ["-"] * (width + 2)
    if alignment in (Alignment.LEFT, Alignment.CENTER):
        dashes[0] = ":"
    if alignment in (Alignment.RIGHT, Alignment.CENTER):
        dashes[-1] = ":"
    return "".join(dashes)


def render_row(
    row: Row,
    widths: list[int],
    alignment: tuple[Alignment, ...],
    width_fn: WidthFunction = display_width,
    align_content: bool = False,
) -> str:
    """Render one data row.

    Cell text is left-justified unless ``align_content`` is set, in which case
    each cell is padded according to its column alignment.
    """
    cells = normalize_row(row, len(alignment))
    padded = [
        pad_cell(cell.text, width, align if align_content else Alignment.DEFAULT, width_fn)
        for cell, width, align in zip(cells, widths, alignment, strict=True)
    ]
    return "| " + " | ".join(padded) + " |"


def render_delimiter(widths: list[int], alignment: tuple[Alignment, ...]) -> str:
    cells = [
        render_delimiter_cell(width, align)
        for width, align in zip(widths, alignment, strict=True)
    ]
    return "|" + "|".join(cells) + "|"


def render_table(
    block: TableBlock,
    width_fn: WidthFunction = display_width,
    align_content: bool = False,
) -> list[str]:
    """Render a block as header, delimiter and body lines, in that order.

    The output always has exactly as many lines as the block spans in the
    source.
    """
    widths = column_widths(block, width_fn)
    lines = [
        render_row(block.header, widths, block.alignment, width_fn, align_content),
        render_delimiter(widths, block.alignment),
    ]
    lines.extend(
        render_row(row, widths, block.alignment, width_fn, align_content) for row in block.body
    )
    return lines
