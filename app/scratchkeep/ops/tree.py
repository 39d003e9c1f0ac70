"""Recursive directory copy and clear.

Both operations keep going past entries they cannot handle. A copy
reports the entries it missed in its CopyTreeResult; a clear gives every
entry two attempts with a single scheduler yield in between and reports
what survived in its ClearReport. Neither raises.
"""

import logging
import os
import shutil
import stat
import sys
import time
from collections.abc import Callable, Iterable

from scratchkeep.ops.diagnostics import FailureSink, log_failure
from scratchkeep.ops.files import StrPath, copy_file_strict, is_blank_path, is_file_entry
from scratchkeep.ops.results import ClearReport, CopyTreeResult, OpResult

logger = logging.getLogger(__name__)


# =============================================================================
# Copy
# =============================================================================


def copy_directory(
    source: StrPath,
    target: StrPath,
    overwrite: bool = True,
    *,
    sink: FailureSink | None = None,
) -> CopyTreeResult:
    """Copy a directory tree into target, file by file.

    A target whose absolute path starts with the source path is refused
    before anything is touched. The comparison is textual, so a sibling
    such as ``/data/foobar`` is refused for source ``/data/foo`` too.

    Files are copied before subdirectories at every level. A file or
    subdirectory that fails is recorded and skipped; everything else is
    still copied.

    Args:
        source: Directory to copy from.
        target: Directory to copy into. Created if missing.
        overwrite: Replace files that already exist in target.
        sink: Receives every suppressed error. Defaults to logging.

    Returns:
        CopyTreeResult that succeeds only if every entry was copied.
    """
    report = sink or log_failure
    source_full = os.path.abspath(os.fspath(source))
    target_full = os.path.abspath(os.fspath(target))

    if target_full.startswith(source_full):
        logger.debug("Refusing to copy %s into itself (%s)", source_full, target_full)
        refused = OpResult.failed(target_full, f"Cannot copy {source_full} into itself")
        return CopyTreeResult(
            source=source_full,
            target=target_full,
            success=False,
            failures=(refused,),
        )

    failures: list[OpResult] = []
    _copy_level(source_full, target_full, overwrite, failures, report)

    return CopyTreeResult(
        source=source_full,
        target=target_full,
        success=not failures,
        failures=tuple(failures),
    )


def _copy_level(
    source: str,
    target: str,
    overwrite: bool,
    failures: list[OpResult],
    report: FailureSink,
) -> None:
    """Copy one directory level, then recurse into its subdirectories."""
    try:
        entries = _list_entries(source)
        os.makedirs(target, exist_ok=True)
    except OSError as e:
        report("copy_directory", source, e)
        failures.append(OpResult.failed(source, e))
        return

    for entry in entries:
        if not is_file_entry(entry):
            continue
        try:
            copy_file_strict(
                entry.path,
                os.path.join(target, entry.name),
                overwrite,
                follow_symlinks=False,
            )
        except OSError as e:
            report("copy_directory", entry.path, e)
            failures.append(OpResult.failed(entry.path, e))

    for entry in entries:
        if is_file_entry(entry):
            continue
        _copy_level(entry.path, os.path.join(target, entry.name), overwrite, failures, report)


# =============================================================================
# Clear
# =============================================================================


def clear_directory(
    path: StrPath | None,
    remove_self: bool = False,
    except_names: Iterable[str] | None = None,
    *,
    sink: FailureSink | None = None,
) -> ClearReport:
    """Delete everything inside a directory, as far as possible.

    Files are deleted first, then each subdirectory is cleared and removed.
    An entry that cannot be removed is given one more attempt after a
    zero-length sleep; if that fails too it is recorded and left behind.

    ``except_names`` protects files directly inside ``path`` only, compared
    case-insensitively. Files of the same name in subdirectories are
    deleted like any other.

    Args:
        path: Directory to clear. Empty paths are a no-op.
        remove_self: Also remove ``path`` itself, with whatever survived.
        except_names: File names to keep at the top level.
        sink: Receives every suppressed error. Defaults to logging.

    Returns:
        ClearReport listing the entries that could not be removed.
    """
    if is_blank_path(path):
        return ClearReport(path="")

    report = sink or log_failure
    path_str = os.fspath(path)  # type: ignore[arg-type]
    result = ClearReport(path=path_str)
    protected = frozenset(name.casefold() for name in except_names or ())

    _clear_level(path_str, protected, result, report)

    if remove_self:
        try:
            _remove_tree(path_str)
            result.removed_self = True
        except OSError as e:
            report("clear_directory", path_str, e)
            result.failures.append(OpResult.failed(path_str, e))

    return result


def _clear_level(
    directory: str,
    protected: frozenset[str],
    result: ClearReport,
    report: FailureSink,
) -> None:
    """Clear one directory level; subdirectories are cleared without protection."""
    try:
        entries = _list_entries(directory)
    except OSError as e:
        report("clear_directory", directory, e)
        result.failures.append(OpResult.failed(directory, e))
        return

    for entry in entries:
        if not is_file_entry(entry) or entry.name.casefold() in protected:
            continue
        try:
            _attempt_twice(os.remove, entry.path, prepare=_clear_readonly)
        except OSError as e:
            report("clear_directory", entry.path, e)
            result.failures.append(OpResult.failed(entry.path, e))

    for entry in entries:
        if is_file_entry(entry):
            continue
        _clear_level(entry.path, frozenset(), result, report)
        try:
            _attempt_twice(os.rmdir, entry.path)
        except OSError as e:
            report("clear_directory", entry.path, e)
            result.failures.append(OpResult.failed(entry.path, e))


def _attempt_twice(
    remove: Callable[[str], None],
    path: str,
    prepare: Callable[[str], None] | None = None,
) -> None:
    """Remove a path; on failure yield the scheduler once and try again.

    The second failure propagates.
    """
    try:
        if prepare is not None:
            prepare(path)
        remove(path)
    except OSError:
        time.sleep(0)
        remove(path)


def _remove_tree(root: str) -> None:
    """Remove a whole tree, making read-only entries writable on the way.

    A failed unlink or rmdir clears the read-only bits of the entry and of
    its parent inside the tree, then tries once more. Anything else, and a
    second failure, propagates.
    """
    outside = os.path.normpath(os.path.dirname(os.path.normpath(root)))

    def _make_writable_and_retry(func: Callable[..., object], path: str, exc: object) -> None:
        if func not in (os.unlink, os.remove, os.rmdir):
            raise exc[1] if isinstance(exc, tuple) else exc  # type: ignore[misc]
        parent = os.path.dirname(path)
        if os.path.normpath(parent) != outside:
            _clear_readonly(parent)
        _clear_readonly(path)
        func(path)

    if sys.version_info >= (3, 12):
        shutil.rmtree(root, onexc=_make_writable_and_retry)
    else:
        shutil.rmtree(root, onerror=_make_writable_and_retry)


def _clear_readonly(path: str) -> None:
    """Make a file writable by its owner. Symlinks are left alone."""
    st = os.lstat(path)
    if stat.S_ISLNK(st.st_mode) or st.st_mode & stat.S_IWRITE:
        return
    os.chmod(path, stat.S_IMODE(st.st_mode) | stat.S_IWRITE)


def _list_entries(directory: str) -> list[os.DirEntry[str]]:
    """List a directory's direct entries, sorted by name."""
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)
