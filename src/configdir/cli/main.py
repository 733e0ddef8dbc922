"""Main CLI application and commands for configdir."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from .. import settings
from ..exceptions import InvalidArgumentError
from ..lookup import config_dirs, is_readable_dir
from ..paths import find_common_base_dir
from ..resolvers import Category, resolve
from .display import OutputFormat, display_candidates, display_dirs

# Create main Typer app
app = typer.Typer(
    name="configdir",
    help="Locate platform configuration directories",
    no_args_is_help=True,
)

# Shared instances
console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich when verbose output is on."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _cfg_base(app_name: str | None) -> tuple[str, ...]:
    return () if app_name is None else (app_name,)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{settings.APP_NAME} {settings.VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log resolver decisions to stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Locate platform configuration directories."""
    configure_logging(verbose)


@app.command("list")
def list_dirs(
    app_name: str | None = typer.Argument(
        None, help="Application name appended to each directory"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--format", "-f", help="Output format"
    ),
):
    """List existing, readable configuration directories in priority order."""
    dirs = config_dirs(*_cfg_base(app_name))
    title = "Configuration directories"
    if app_name:
        title = f"{title} for {app_name}"
    display_dirs(console, dirs, output_format, title)


@app.command("show")
def show(
    category: str = typer.Argument(
        ..., help=f"Category ({', '.join(c.value for c in Category)})"
    ),
    app_name: str | None = typer.Argument(
        None, help="Application name appended to each directory"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--format", "-f", help="Output format"
    ),
):
    """Show the candidate directories of one category, existing or not."""
    try:
        dirs = resolve(category, *_cfg_base(app_name))
    except InvalidArgumentError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
    except ValueError:
        err_console.print(f"[red]Error:[/red] Unknown category '{category}'")
        err_console.print(
            f"[dim]Available categories: {', '.join(c.value for c in Category)}[/dim]"
        )
        raise typer.Exit(2)

    display_dirs(console, dirs, output_format, f"{category} candidates")


@app.command("candidates")
def candidates(
    app_name: str | None = typer.Argument(
        None, help="Application name appended to each directory"
    ),
):
    """Show every category's candidates and whether each one is usable."""
    cfg_base = _cfg_base(app_name)
    rows: list[tuple[str, str, bool]] = []
    for category in Category:
        # The single application directory takes no application name
        if category is Category.SINGLEAPP and cfg_base:
            continue
        for path in resolve(category, *cfg_base):
            rows.append((category.value, path, is_readable_dir(path)))

    display_candidates(console, rows, "Configuration directory candidates")


@app.command("common-base")
def common_base(
    dir_a: str = typer.Argument(..., help="First directory"),
    dir_b: str = typer.Argument(..., help="Second directory"),
):
    """Print the deepest directory shared by two paths."""
    typer.echo(find_common_base_dir(dir_a, dir_b))
