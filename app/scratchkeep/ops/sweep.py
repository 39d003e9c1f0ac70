"""Stale temp file sweep.

Deletes files that have not been written for longer than the retention
window from the top level of every configured scratch root. Meant to be
called from a scheduled task.
"""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from scratchkeep.ops.diagnostics import FailureSink, log_failure
from scratchkeep.ops.files import delete_file, is_file_entry
from scratchkeep.ops.results import OpResult, SweepReport

if TYPE_CHECKING:
    from pathlib import Path

    from scratchkeep.scratch.resolver import PathResolver

logger = logging.getLogger(__name__)

# Files last written before now - RETENTION_WINDOW are stale
RETENTION_WINDOW = timedelta(hours=5)


def sweep_stale_temp_files(
    resolver: PathResolver,
    *,
    now: datetime | None = None,
    sink: FailureSink | None = None,
) -> SweepReport:
    """Delete stale files from the global and tenant scratch roots.

    Only direct files of each root are considered; subdirectories are
    never entered. Roots that don't exist are skipped without being
    created. A root that cannot be listed is recorded and the sweep moves
    on to the next one.

    Args:
        resolver: Resolver holding the scratch root configuration.
        now: Reference time; a naive value is read as local time.
            Defaults to the current time.
        sink: Receives every suppressed error. Defaults to logging.

    Returns:
        SweepReport with the swept roots, deleted files and failures.
    """
    report = sink or log_failure
    cutoff = (now or datetime.now(UTC)).astimezone(UTC) - RETENTION_WINDOW
    result = SweepReport()

    for kind in resolver.configured_kinds():
        root = resolver.root_path(kind)
        if root is None or not root.is_dir():
            logger.debug("Skipping missing %s scratch root %s", kind.value, root)
            continue

        result.roots.append(str(root))
        try:
            _sweep_root(root, cutoff, result, report)
        except OSError as e:
            report("sweep_stale_temp_files", str(root), e)
            result.failures.append(OpResult.failed(str(root), e))

    logger.info(
        "Swept %d scratch root(s): %d deleted, %d failed",
        len(result.roots),
        len(result.deleted),
        len(result.failures),
    )
    return result


def _sweep_root(
    root: Path,
    cutoff: datetime,
    result: SweepReport,
    report: FailureSink,
) -> None:
    """Delete the stale direct files of one root. Listing errors propagate."""
    with os.scandir(root) as entries:
        files = [entry for entry in entries if is_file_entry(entry)]

    for entry in files:
        try:
            modified = datetime.fromtimestamp(entry.stat(follow_symlinks=False).st_mtime, UTC)
            if modified >= cutoff:
                continue
            deleted = delete_file(entry.path, sink=report)
        except OSError as e:
            report("sweep_stale_temp_files", entry.path, e)
            result.failures.append(OpResult.failed(entry.path, e))
            continue

        if deleted:
            result.deleted.append(entry.path)
        else:
            result.failures.append(deleted)
