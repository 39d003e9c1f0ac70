"""Best-effort single-file operations.

Each function catches the OSError it may hit, hands it to a failure sink,
and reports the outcome as an OpResult (or a plain default value) rather
than raising. The one exception is asking delete_file to remove a
directory, which is refused loudly.
"""

import errno
import logging
import os
import shutil
from pathlib import Path

from scratchkeep.ops.diagnostics import FailureSink, log_failure
from scratchkeep.ops.results import OpResult

logger = logging.getLogger(__name__)

StrPath = str | os.PathLike[str]


class UnauthorizedDeleteError(PermissionError):
    """Raised when delete_file is asked to delete a directory."""


def is_blank_path(path: StrPath | None) -> bool:
    """Check whether a path argument is missing or empty."""
    return path is None or os.fspath(path) == ""


def is_file_entry(entry: os.DirEntry[str]) -> bool:
    """Check whether a directory entry is treated as a file.

    Everything that is not a real directory counts as a file, including
    symlinks to directories, which are never followed.
    """
    return not entry.is_dir(follow_symlinks=False)


def delete_file(path: StrPath | None, *, sink: FailureSink | None = None) -> OpResult:
    """Delete a single file.

    An empty or missing path counts as success.

    Args:
        path: File to delete.
        sink: Receives the error if deletion fails. Defaults to logging.

    Returns:
        OpResult indicating success or failure.

    Raises:
        UnauthorizedDeleteError: If path is a directory. Nothing is deleted.
    """
    if is_blank_path(path):
        return OpResult.ok("")

    path_str = os.fspath(path)  # type: ignore[arg-type]
    target = Path(path_str)

    if os.path.isdir(path_str) and not os.path.islink(path_str):
        msg = f"Deleting directories is not allowed: {path_str}"
        raise UnauthorizedDeleteError(errno.EISDIR, msg, path_str)

    try:
        target.unlink(missing_ok=True)
    except OSError as e:
        (sink or log_failure)("delete_file", path_str, e)
        return OpResult.failed(path_str, e)

    return OpResult.ok(path_str)


def copy_file_strict(
    source: StrPath,
    destination: StrPath,
    overwrite: bool,
    *,
    follow_symlinks: bool = True,
) -> None:
    """Copy one file, raising on any failure.

    Args:
        source: File to copy.
        destination: Full destination file path (not a directory).
        overwrite: If False, an existing destination is an error.
        follow_symlinks: If False, symlinks are copied as symlinks.

    Raises:
        IsADirectoryError: If destination is a directory.
        FileExistsError: If destination exists and overwrite is False.
        OSError: If the copy itself fails.
    """
    if os.path.isdir(destination) and not os.path.islink(destination):
        raise IsADirectoryError(errno.EISDIR, "Destination is a directory", os.fspath(destination))
    if os.path.lexists(destination):
        if not overwrite:
            raise FileExistsError(errno.EEXIST, "Destination already exists", os.fspath(destination))
        if not follow_symlinks:
            # copy2 cannot replace an existing entry with a symlink
            os.unlink(destination)
    shutil.copy2(source, destination, follow_symlinks=follow_symlinks)


def copy_file(
    source: StrPath,
    destination: StrPath,
    overwrite: bool = True,
    delete_source: bool = False,
    *,
    sink: FailureSink | None = None,
) -> OpResult:
    """Copy a single file, optionally deleting the source afterwards.

    Args:
        source: File to copy.
        destination: Full destination file path.
        overwrite: If False and destination exists, the copy fails.
        delete_source: Delete source after a successful copy.
        sink: Receives any error. Defaults to logging.

    Returns:
        OpResult for the source path. Fails if either the copy or the
        requested source deletion fails.
    """
    report = sink or log_failure
    source_str = os.fspath(source)

    try:
        copy_file_strict(source, destination, overwrite)
    except OSError as e:
        report("copy_file", source_str, e)
        return OpResult.failed(source_str, e)

    if delete_source:
        try:
            deleted = delete_file(source_str, sink=report)
        except UnauthorizedDeleteError as e:
            report("copy_file", source_str, e)
            return OpResult.failed(source_str, e)
        if not deleted:
            return OpResult(path=source_str, success=False, error=deleted.error)

    return OpResult.ok(source_str)


def truncate_file(path: StrPath | None, *, sink: FailureSink | None = None) -> None:
    """Empty a file, creating it if needed.

    Fire-and-forget: failures go to the sink only.

    Args:
        path: File to truncate. Empty paths are ignored.
        sink: Receives the error if writing fails. Defaults to logging.
    """
    if is_blank_path(path):
        return

    path_str = os.fspath(path)  # type: ignore[arg-type]
    try:
        Path(path_str).write_bytes(b"")
    except OSError as e:
        (sink or log_failure)("truncate_file", path_str, e)


def count_files(directory: StrPath, *, sink: FailureSink | None = None) -> int:
    """Count the direct file entries of a directory.

    Args:
        directory: Directory to list.
        sink: Receives the error if listing fails. Defaults to logging.

    Returns:
        Number of files, or 0 if the directory cannot be listed.
    """
    try:
        with os.scandir(directory) as entries:
            return sum(1 for entry in entries if is_file_entry(entry))
    except OSError as e:
        (sink or log_failure)("count_files", os.fspath(directory), e)
        return 0
