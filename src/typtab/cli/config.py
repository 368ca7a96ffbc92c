"""Config command — show or update .typtab.yaml."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from typtab.config import ConfigManager
from typtab.errors import InvalidBreakIndicator

console = Console()


def config(
    set_break: Optional[str] = typer.Option(None, "--break", "-b", help="Set the break indicator"),
    reset: bool = typer.Option(False, "--reset", help="Restore default settings"),
    format: str = typer.Option("text", "--format", "-f", help="Output format: text, json"),
    project_dir: str = typer.Option(".", "--project-dir", help="Directory holding .typtab.yaml"),
) -> None:
    """Show or update formatting settings."""
    mgr = ConfigManager(project_dir)

    if reset:
        mgr.reset()
        console.print("[green]Settings reset.[/green]")
        return

    if set_break is not None:
        try:
            mgr.update(break_indicator=set_break)
        except InvalidBreakIndicator as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(1)
        console.print(f"[green]Break indicator set:[/green] {escape(set_break)}")
        return

    settings = mgr.read()

    if format == "json":
        print(json.dumps({"break_indicator": settings.break_indicator}, indent=2))
        return

    indicator = settings.break_indicator
    console.print(f"\n[bold]Settings: {mgr.config_path}[/bold]\n")
    if indicator is None:
        console.print("  Break indicator: backslash [dim](default)[/dim]")
    else:
        console.print(f"  Break indicator: {escape(indicator)}")
    console.print()
