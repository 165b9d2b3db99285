"""mdfmt — align the columns of Markdown tables."""

from mdfmt.core import Formatter, format_file, format_lines, format_text
from mdfmt.types import Alignment, Cell, Row, TableBlock

# The engine's single entry point: format(lines) -> formatted lines
format = format_lines

__all__ = [
    "Alignment",
    "Cell",
    "Formatter",
    "Row",
    "TableBlock",
    "format",
    "format_file",
    "format_lines",
    "format_text",
]
