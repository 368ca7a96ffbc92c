"""typtab CLI entry point."""

import typer
from rich.console import Console

from typtab import __version__
from typtab.cli.config import config
from typtab.cli.format import format_table

app = typer.Typer(
    name="typtab",
    help="Format rows as Typst table content",
    no_args_is_help=True,
    invoke_without_command=True,
)
app.command(name="format")(format_table)
app.command(name="config")(config)

console = Console()


def _print_version() -> None:
    console.print(f"typtab {__version__}")


@app.callback()
def main(
    show_version: bool = typer.Option(
        False, "--version", "-V", help="Show version and exit"
    ),
) -> None:
    """typtab: Typst table content from JSON, YAML or CSV rows."""
    if show_version:
        _print_version()
        raise typer.Exit()


@app.command()
def version():
    """Show typtab version."""
    _print_version()


if __name__ == "__main__":
    app()
