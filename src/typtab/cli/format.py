"""Format command implementation."""

import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from typtab.config import ConfigManager
from typtab.errors import TyptabError
from typtab.format import table_content, table_content_with_breaks
from typtab.loader import FORMATS, load_rows, parse_rows

console = Console(stderr=True)


def format_table(
    source: str = typer.Argument("-", help="Rows file (.json, .yaml, .csv) or - for stdin"),
    break_indicator: Optional[str] = typer.Option(
        None, "--break", "-b", help="Text that marks a line break (default: backslash)"
    ),
    input_format: Optional[str] = typer.Option(
        None, "--format", "-f", help=f"Input format: {', '.join(FORMATS)}"
    ),
    infer_ints: bool = typer.Option(
        False, "--infer-ints", help="Treat whole-number CSV cells as integers"
    ),
    project_dir: str = typer.Option(".", "--project-dir", help="Directory holding .typtab.yaml"),
) -> None:
    """Print rows as content for a Typst #table call."""

    if break_indicator is None:
        break_indicator = ConfigManager(project_dir).read().break_indicator

    try:
        if source == "-":
            rows = parse_rows(sys.stdin.read(), input_format or "json", infer_integers=infer_ints)
        else:
            rows = load_rows(source, input_format, infer_integers=infer_ints)

        if break_indicator is None:
            content = table_content(rows)
        else:
            content = table_content_with_breaks(rows, break_indicator)
    except TyptabError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    # Content blocks use square brackets, so bypass rich markup.
    typer.echo(content)
