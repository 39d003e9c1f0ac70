"""Scratch root commands.

Provides commands to resolve scratch directories, pick unused
directory names, and count files.
"""

from pathlib import Path
from typing import Annotated

import typer

from scratchkeep.cli.types import get_resolver
from scratchkeep.ops.files import count_files
from scratchkeep.ops.naming import allocate_unique_name
from scratchkeep.scratch.resolver import ScratchRootError, ScratchRootKind
from scratchkeep.utils.formatting import print_error


def root(
    ctx: typer.Context,
    tenant: Annotated[
        bool,
        typer.Option("--tenant", "-t", help="Use the tenant scratch root."),
    ] = False,
    sub: Annotated[
        str | None,
        typer.Option("--sub", "-s", help="Subdirectory to create and print."),
    ] = None,
) -> None:
    """Print a scratch directory, creating it if needed."""
    resolver = get_resolver(ctx)
    kind = ScratchRootKind.TENANT if tenant else ScratchRootKind.GLOBAL

    try:
        path = resolver.resolve(kind, sub)
    except ScratchRootError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    typer.echo(str(path))


def name(
    parent: Annotated[
        Path,
        typer.Argument(help="Directory the new name is meant for."),
    ],
    desired: Annotated[
        str | None,
        typer.Argument(help="Preferred name (default: random UUID)."),
    ] = None,
) -> None:
    """Print a directory name that is not taken under PARENT."""
    typer.echo(allocate_unique_name(parent, desired))


def count(
    path: Annotated[
        Path,
        typer.Argument(help="Directory to count files in."),
    ],
) -> None:
    """Print the number of files directly inside PATH."""
    typer.echo(str(count_files(path)))
