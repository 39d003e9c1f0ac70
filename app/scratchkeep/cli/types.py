"""Shared helpers for CLI commands.

This module provides config loading and resolver construction used
across multiple CLI command modules.
"""

import typer

from scratchkeep.core.config import ScratchConfig, ScratchConfigError, load_config_or_default
from scratchkeep.scratch.resolver import PathResolver
from scratchkeep.utils.formatting import print_error


def get_config(ctx: typer.Context) -> ScratchConfig:
    """Load the config selected by the global --config option.

    Args:
        ctx: Typer context carrying the global options.

    Returns:
        Loaded config, or defaults if no config file exists.

    Raises:
        typer.Exit: If the config file is invalid.
    """
    obj = ctx.obj or {}
    try:
        return load_config_or_default(obj.get("config_path"))
    except ScratchConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def get_resolver(ctx: typer.Context) -> PathResolver:
    """Build a PathResolver from the selected config."""
    return PathResolver(get_config(ctx))
