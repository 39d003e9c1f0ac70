"""Stale temp file sweep command.

Intended to be run from a scheduled task (cron, systemd timer).
"""

import json
from typing import Annotated

import typer

from scratchkeep.cli.types import get_resolver
from scratchkeep.ops.results import SweepReport
from scratchkeep.ops.sweep import RETENTION_WINDOW, sweep_stale_temp_files
from scratchkeep.utils.formatting import (
    console,
    create_result_table,
    print_info,
    print_success,
    print_warning,
)


def sweep(
    ctx: typer.Context,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON."),
    ] = False,
) -> None:
    """Delete temp files older than the retention window from all scratch roots."""
    resolver = get_resolver(ctx)
    report = sweep_stale_temp_files(resolver)

    if json_output:
        _print_json(report)
    else:
        _print_report(report)

    if not report:
        raise typer.Exit(code=1)


def _print_json(report: SweepReport) -> None:
    """Display the sweep report as JSON."""
    data = {
        "roots": report.roots,
        "deleted": report.deleted,
        "failed": [{"path": r.path, "error": r.error} for r in report.failures],
    }
    console.print_json(json.dumps(data))


def _print_report(report: SweepReport) -> None:
    """Display the sweep report as a table with a summary line."""
    if not report.roots:
        print_info("No scratch roots exist yet. Nothing to sweep.")
        return

    hours = int(RETENTION_WINDOW.total_seconds() // 3600)
    if not report.deleted and not report.failures:
        print_success(f"No temp files older than {hours}h found.")
        return

    table = create_result_table("Stale Temp Files")
    for path in report.deleted:
        table.add_row(path, "[deleted]deleted[/]", "")
    for failure in report.failures:
        table.add_row(failure.path, "[error]failed[/]", failure.error or "Unknown error")
    console.print(table)

    if report.failures:
        print_warning(f"{len(report.deleted)} deleted, {len(report.failures)} failed")
    else:
        print_success(f"Deleted {len(report.deleted)} stale file(s).")
