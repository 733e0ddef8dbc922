"""Display helper functions for CLI output."""

import json
from enum import Enum

import typer
import yaml
from rich.console import Console
from rich.table import Table


class OutputFormat(str, Enum):
    """Output formats supported by the listing commands."""

    TABLE = "table"
    PLAIN = "plain"
    JSON = "json"
    YAML = "yaml"


def display_dirs(
    console: Console, dirs: list[str], output_format: OutputFormat, title: str
) -> None:
    """Print a list of directories in the requested format.

    Plain, JSON and YAML output bypass rich so it can be piped.
    """
    if output_format is OutputFormat.PLAIN:
        for path in dirs:
            typer.echo(path)
        return

    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps(dirs, indent=2))
        return

    if output_format is OutputFormat.YAML:
        typer.echo(yaml.safe_dump(dirs, default_flow_style=False), nl=False)
        return

    if not dirs:
        console.print(f"[yellow]No directories found for {title}[/yellow]")
        return

    table = Table(title=title, show_header=True, expand=True)
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Directory", style="cyan", overflow="fold")
    for index, path in enumerate(dirs, start=1):
        table.add_row(str(index), path)

    console.print()
    console.print(table)
    console.print()


def display_candidates(
    console: Console, rows: list[tuple[str, str, bool]], title: str
) -> None:
    """Print every category's candidates with a readable/missing marker."""
    table = Table(title=title, show_header=True, expand=True)
    table.add_column("Category", style="magenta", no_wrap=True)
    table.add_column("Directory", style="cyan", overflow="fold")
    table.add_column("Status", no_wrap=True)

    for category, path, readable in rows:
        status = "[green]✓ readable[/green]" if readable else "[dim]missing[/dim]"
        table.add_row(category, path, status)

    console.print()
    console.print(table)
    console.print()
