"""Directory tree commands.

Provides commands to clear a directory and to copy a directory tree,
both continuing past entries that cannot be handled.
"""

from pathlib import Path
from typing import Annotated

import typer

from scratchkeep.ops.results import OpResult
from scratchkeep.ops.tree import clear_directory, copy_directory
from scratchkeep.utils.formatting import (
    console,
    create_result_table,
    print_info,
    print_success,
    print_warning,
)


def clear(
    path: Annotated[
        Path,
        typer.Argument(help="Directory to clear."),
    ],
    remove_self: Annotated[
        bool,
        typer.Option("--remove-self", help="Also remove the directory itself."),
    ] = False,
    except_names: Annotated[
        list[str] | None,
        typer.Option(
            "--except",
            "-x",
            help="File name to keep at the top level (repeatable, case-insensitive).",
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete the contents of PATH as far as possible."""
    if not yes:
        what = f"{path} and everything in it" if remove_self else f"everything in {path}"
        confirmed = typer.confirm(f"Delete {what}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    report = clear_directory(path, remove_self=remove_self, except_names=except_names)

    if report.failures:
        _print_failures("Entries Left Behind", report.failures)
        print_warning(f"{len(report.failures)} path(s) could not be removed.")
        raise typer.Exit(code=1)

    print_success(f"Removed {path}." if report.removed_self else f"Cleared {path}.")


def copy(
    source: Annotated[
        Path,
        typer.Argument(help="Directory to copy from."),
    ],
    target: Annotated[
        Path,
        typer.Argument(help="Directory to copy into."),
    ],
    no_overwrite: Annotated[
        bool,
        typer.Option(
            "--no-overwrite",
            help="Fail on files that already exist in TARGET instead of replacing them.",
        ),
    ] = False,
) -> None:
    """Copy the directory tree SOURCE into TARGET."""
    result = copy_directory(source, target, overwrite=not no_overwrite)

    if not result:
        _print_failures("Copy Failures", list(result.failures))
        print_warning(f"{len(result.failures)} path(s) could not be copied.")
        raise typer.Exit(code=1)

    print_success(f"Copied {result.source} to {result.target}.")


def _print_failures(title: str, failures: list[OpResult]) -> None:
    """Display failed entries as a table."""
    table = create_result_table(title)
    for failure in failures:
        table.add_row(failure.path, "[error]failed[/]", failure.error or "Unknown error")
    console.print(table)
