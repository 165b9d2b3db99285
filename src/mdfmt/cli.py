"""Click CLI for mdfmt — align Markdown tables."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from mdfmt.config.hierarchy import load_config_hierarchy
from mdfmt.config.schema import FormatterConfig
from mdfmt.errors import MdfmtError
from mdfmt.tables.width import list_width_policies

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(default_level)
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
        force=True,
    )


def _load_config(**overrides: object) -> FormatterConfig:
    try:
        return FormatterConfig.from_mapping(load_config_hierarchy(**overrides))
    except MdfmtError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@click.group()
@click.version_option(package_name="mdfmt")
def cli() -> None:
    """mdfmt — Markdown table formatter."""


@cli.command("format")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.argument("destination", type=click.Path(dir_okay=False), required=False)
@click.option("-i", "--in-place", is_flag=True, default=False, help="Modify the source file in place.")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Warn about rows with more cells than the table has columns.",
)
@click.option(
    "--width",
    type=click.Choice(list_width_policies()),
    default=None,
    help="How to measure cell text width.",
)
@click.option(
    "--code-fences/--no-code-fences",
    default=None,
    help="Leave tables inside fenced code blocks untouched.",
)
@click.option(
    "--align-content/--no-align-content",
    default=None,
    help="Pad cell text according to its column alignment.",
)
@click.option("--encoding", type=str, default=None, help="Text encoding of the documents.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def format_command(
    source: str,
    destination: str | None,
    in_place: bool,
    strict: bool | None,
    width: str | None,
    code_fences: bool | None,
    align_content: bool | None,
    encoding: str | None,
    verbose: int,
) -> None:
    """Align the tables in SOURCE.

    Output goes to DESTINATION when given, back into SOURCE with --in-place,
    or to stdout. Use - as SOURCE to read from stdin.
    """
    config = _load_config(
        strict=strict,
        width=width,
        code_fences=code_fences,
        align_content=align_content,
        encoding=encoding,
    )
    _setup_logging(verbose, config.log_level)

    if in_place and destination:
        error_console.print("[red]Error:[/red] Cannot be both in-place and have a destination.")
        sys.exit(1)

    try:
        if source == "-":
            text = _format_stdin(config, in_place)
            if destination:
                from mdfmt.core import write_document

                write_document(destination, text, config.encoding)
                error_console.print(f"[green]Written to {destination}[/green]")
                return
        else:
            from mdfmt.core import format_file

            result = format_file(
                source, destination=destination, in_place=in_place, config=config
            )
            if result.destination is not None:
                if result.changed or not in_place:
                    error_console.print(f"[green]Written to {result.destination}[/green]")
                return
            text = result.text
    except MdfmtError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    stdout = click.get_binary_stream("stdout")
    stdout.write(text.encode(config.encoding))
    stdout.flush()


def _format_stdin(config: FormatterConfig, in_place: bool) -> str:
    """Read a document from stdin and return it formatted."""
    from mdfmt.core import Formatter

    if in_place:
        raise MdfmtError("Cannot format stdin in place.")

    raw = click.get_binary_stream("stdin").read()
    try:
        text = raw.decode(config.encoding)
    except UnicodeDecodeError as e:
        raise MdfmtError(f"Cannot decode stdin as {config.encoding}: {e}") from e
    return Formatter.from_config(config).format_text(text)


@cli.command("config")
def show_config() -> None:
    """Show the effective configuration."""
    config = _load_config()

    table = Table(title="Effective Configuration", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key, value in config.model_dump(mode="json").items():
        table.add_row(key, str(value))

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
