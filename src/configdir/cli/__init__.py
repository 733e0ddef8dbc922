"""CLI package for configdir.

- main: Typer application and commands
- display: Output helpers shared by the commands
"""

from .main import app

__all__ = ["app"]
