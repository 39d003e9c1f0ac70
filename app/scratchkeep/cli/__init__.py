"""CLI package for scratchkeep.

This package contains the Typer application and all subcommands.
"""

from scratchkeep.cli.main import app

__all__ = ["app"]
