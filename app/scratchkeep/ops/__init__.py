"""Best-effort filesystem operations.

This module provides single-file primitives, recursive copy and clear,
the stale temp file sweep, and unique name allocation. Apart from the
documented exceptions, none of these raise on filesystem errors.
"""

from scratchkeep.ops.diagnostics import CollectingSink, FailureSink, RecordedFailure, log_failure
from scratchkeep.ops.files import (
    UnauthorizedDeleteError,
    copy_file,
    count_files,
    delete_file,
    truncate_file,
)
from scratchkeep.ops.naming import MAX_NAME_ATTEMPTS, allocate_unique_name
from scratchkeep.ops.results import ClearReport, CopyTreeResult, OpResult, SweepReport
from scratchkeep.ops.sweep import RETENTION_WINDOW, sweep_stale_temp_files
from scratchkeep.ops.tree import clear_directory, copy_directory

__all__ = [
    "MAX_NAME_ATTEMPTS",
    "RETENTION_WINDOW",
    "ClearReport",
    "CollectingSink",
    "CopyTreeResult",
    "FailureSink",
    "OpResult",
    "RecordedFailure",
    "SweepReport",
    "UnauthorizedDeleteError",
    "allocate_unique_name",
    "clear_directory",
    "copy_directory",
    "copy_file",
    "count_files",
    "delete_file",
    "log_failure",
    "sweep_stale_temp_files",
    "truncate_file",
]
