"""Failure sinks for suppressed filesystem errors.

Every best-effort operation hands each failure it swallows to a sink
before converting it into a result. The default sink logs it; callers
can pass their own to forward failures to metrics or tracing.
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)


class FailureSink(Protocol):
    """Receives a failure that an operation is about to suppress."""

    def __call__(self, operation: str, path: str, error: BaseException) -> None: ...


def log_failure(operation: str, path: str, error: BaseException) -> None:
    """Default sink: log the suppressed failure as a warning.

    Args:
        operation: Name of the operation that failed (e.g. "delete_file").
        path: Path the operation was working on.
        error: The suppressed exception.
    """
    logger.warning("%s failed for %s: %s", operation, path, error)


@dataclass(frozen=True, slots=True)
class RecordedFailure:
    """A failure captured by CollectingSink."""

    operation: str
    path: str
    error: BaseException


@dataclass(slots=True)
class CollectingSink:
    """Sink that keeps every failure in memory, then logs it.

    Attributes:
        failures: Failures in the order they were reported.
    """

    failures: list[RecordedFailure] = field(default_factory=list)

    def __call__(self, operation: str, path: str, error: BaseException) -> None:
        self.failures.append(RecordedFailure(operation=operation, path=path, error=error))
        log_failure(operation, path, error)

    @property
    def paths(self) -> list[str]:
        """Paths of all recorded failures, in order."""
        return [failure.path for failure in self.failures]
