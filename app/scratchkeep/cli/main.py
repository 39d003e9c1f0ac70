"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from scratchkeep import __version__
from scratchkeep.cli.commands import config, scratch, sweep, tree

# Create main Typer app
app = typer.Typer(
    name="scratchkeep",
    help="Best-effort scratch space and filesystem maintenance.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"scratchkeep version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file (default: ~/.config/scratchkeep/config.toml).",
        ),
    ] = None,
) -> None:
    """scratchkeep - Best-effort scratch space and filesystem maintenance.

    Resolve scratch directories, sweep stale temp files, and copy or
    clear directory trees without failing on locked or unreadable entries.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register commands
app.command("root")(scratch.root)
app.command("name")(scratch.name)
app.command("count")(scratch.count)
app.command("sweep")(sweep.sweep)
app.command("clear")(tree.clear)
app.command("copy")(tree.copy)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
