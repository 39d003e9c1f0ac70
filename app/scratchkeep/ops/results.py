"""Result types for best-effort filesystem operations.

Operations that suppress failures report them through these objects
instead of raising. Every result is truthy on success and falsy on
failure, so callers can branch on it like a plain boolean.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class OpResult:
    """Result of a single best-effort file operation.

    Attributes:
        path: Path that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
    """

    path: str
    success: bool
    error: str | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, path: str) -> "OpResult":
        return cls(path=path, success=True)

    @classmethod
    def failed(cls, path: str, error: BaseException | str) -> "OpResult":
        return cls(path=path, success=False, error=str(error))


@dataclass(frozen=True, slots=True)
class CopyTreeResult:
    """Aggregate result of a recursive directory copy.

    Attributes:
        source: Source directory.
        target: Target directory.
        success: True only if every file and subdirectory was copied.
        failures: Entries that could not be copied.
    """

    source: str
    target: str
    success: bool
    failures: tuple[OpResult, ...] = ()

    def __bool__(self) -> bool:
        return self.success


@dataclass(slots=True)
class ClearReport:
    """What a directory clear could not remove.

    Attributes:
        path: Directory that was cleared.
        failures: Files and directories that survived both attempts.
        removed_self: Whether the directory itself was removed.
    """

    path: str
    failures: list[OpResult] = field(default_factory=list)
    removed_self: bool = False

    @property
    def success(self) -> bool:
        return not self.failures

    def __bool__(self) -> bool:
        return self.success


@dataclass(slots=True)
class SweepReport:
    """Outcome of a stale temp file sweep.

    Attributes:
        roots: Scratch roots that were swept.
        deleted: Stale files that were deleted.
        failures: Files or roots that could not be processed.
    """

    roots: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    failures: list[OpResult] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures

    def __bool__(self) -> bool:
        return self.success
