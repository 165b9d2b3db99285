"""Table engine: row parsing, delimiter classification, scanning, rendering."""

from mdfmt.tables.delimiter import classify_cell, classify_delimiter
from mdfmt.tables.renderer import MIN_COLUMN_WIDTH, column_widths, render_table
from mdfmt.tables.row_parser import is_table_row, parse_row, split_row
from mdfmt.tables.scanner import LineCursor, scan
from mdfmt.tables.width import ascii_width, display_width, get_width_function

__all__ = [
    "MIN_COLUMN_WIDTH",
    "LineCursor",
    "ascii_width",
    "classify_cell",
    "classify_delimiter",
    "column_widths",
    "display_width",
    "get_width_function",
    "is_table_row",
    "parse_row",
    "render_table",
    "scan",
    "split_row",
]
