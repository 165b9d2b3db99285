"""Top-level entry points: format_lines(), format_text(), format_file(), Formatter."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from mdfmt.config.schema import FormatterConfig
from mdfmt.errors import InputError, MdfmtError
from mdfmt.tables.renderer import render_table
from mdfmt.tables.scanner import scan
from mdfmt.tables.width import display_width, get_width_function
from mdfmt.types import FormatResult, PassThrough, TableBlock, WidthFunction

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class Formatter:
    """Table formatter with a fixed set of options.

    Instances keep no document state between calls apart from the running
    ``tables`` count, so one formatter can be reused for many documents.
    """

    def __init__(
        self,
        width_fn: WidthFunction = display_width,
        *,
        code_fences: bool = True,
        strict: bool = False,
        align_content: bool = False,
    ) -> None:
        self._width_fn = width_fn
        self._code_fences = code_fences
        self._strict = strict
        self._align_content = align_content
        self.tables = 0

    @classmethod
    def from_config(cls, config: FormatterConfig) -> Formatter:
        return cls(
            get_width_function(config.width.value),
            code_fences=config.code_fences,
            strict=config.strict,
            align_content=config.align_content,
        )

    def format_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Lazily format a sequence of lines given without terminators.

        Lines outside tables come back unchanged. Each table comes back as
        exactly as many lines as it occupied.
        """
        for segment in scan(lines, code_fences=self._code_fences):
            if isinstance(segment, PassThrough):
                yield segment.line
                continue
            self.tables += 1
            self._report_dropped_cells(segment)
            yield from render_table(segment, self._width_fn, self._align_content)

    def format_text(self, text: str) -> str:
        """Format a whole document, keeping every line's own line ending."""
        lines, endings = split_lines(text)
        formatted = self.format_lines(lines)
        return "".join(
            line + ending for line, ending in zip(formatted, endings, strict=True)
        )

    def _report_dropped_cells(self, block: TableBlock) -> None:
        level = logging.WARNING if self._strict else logging.DEBUG
        for row in (block.header, *block.body):
            extra = len(row) - block.column_count
            if extra > 0:
                logger.log(
                    level,
                    "Line %d has %d cell(s) beyond the %d table column(s); dropping them",
                    row.line_no,
                    extra,
                    block.column_count,
                )


def split_lines(text: str) -> tuple[list[str], list[str]]:
    """Split text into lines and the terminator that ended each one.

    The last line's terminator is "" when the text does not end with a
    line break.
    """
    lines: list[str] = []
    endings: list[str] = []
    pos = 0
    for match in _LINE_BREAK.finditer(text):
        lines.append(text[pos : match.start()])
        endings.append(match.group())
        pos = match.end()
    if pos < len(text):
        lines.append(text[pos:])
        endings.append("")
    return lines, endings


def format_lines(
    lines: Iterable[str],
    *,
    width_fn: WidthFunction = display_width,
    code_fences: bool = True,
    strict: bool = False,
    align_content: bool = False,
) -> Iterator[str]:
    """Format the tables in a sequence of lines (without terminators)."""
    formatter = Formatter(
        width_fn, code_fences=code_fences, strict=strict, align_content=align_content
    )
    return formatter.format_lines(lines)


def format_text(
    text: str,
    *,
    width_fn: WidthFunction = display_width,
    code_fences: bool = True,
    strict: bool = False,
    align_content: bool = False,
) -> str:
    """Format the tables in a document given as one string."""
    formatter = Formatter(
        width_fn, code_fences=code_fences, strict=strict, align_content=align_content
    )
    return formatter.format_text(text)


def read_document(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a document without translating its line endings."""
    path = Path(path)
    try:
        with open(path, encoding=encoding, newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise InputError(f"File not found: {path}", path=path, original=e) from e
    except UnicodeDecodeError as e:
        raise InputError(f"Cannot decode {path} as {encoding}: {e}", path=path, original=e) from e
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}", path=path, original=e) from e


def write_document(path: str | Path, text: str, encoding: str = "utf-8") -> None:
    """Write a document exactly as given, line endings included."""
    path = Path(path)
    try:
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(text)
    except OSError as e:
        raise InputError(f"Cannot write {path}: {e}", path=path, original=e) from e


def format_file(
    path: str | Path,
    *,
    destination: str | Path | None = None,
    in_place: bool = False,
    config: FormatterConfig | None = None,
) -> FormatResult:
    """Format one file.

    The result goes to ``destination``, back into ``path`` when ``in_place``
    is set, or nowhere (the caller uses ``FormatResult.text``).
    """
    if in_place and destination is not None:
        raise MdfmtError("Cannot be both in-place and have a destination.")

    config = config or FormatterConfig()
    source = Path(path)
    original = read_document(source, config.encoding)

    formatter = Formatter.from_config(config)
    formatted = formatter.format_text(original)
    changed = formatted != original
    logger.info("%s: %d table(s), %s", source, formatter.tables, "changed" if changed else "unchanged")

    target: Path | None = None
    if in_place:
        target = source
        if changed:
            write_document(source, formatted, config.encoding)
    elif destination is not None:
        target = Path(destination)
        write_document(target, formatted, config.encoding)

    return FormatResult(
        text=formatted,
        changed=changed,
        tables=formatter.tables,
        source=source,
        destination=target,
    )
