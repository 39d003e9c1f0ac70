"""CLI commands for scratchkeep.

This package contains all subcommand implementations.
"""

from scratchkeep.cli.commands import config, scratch, sweep, tree

__all__ = ["config", "scratch", "sweep", "tree"]
