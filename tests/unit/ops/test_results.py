"""Unit tests for result types and failure sinks."""

import logging

import pytest
from scratchkeep.ops.diagnostics import CollectingSink, log_failure
from scratchkeep.ops.results import ClearReport, CopyTreeResult, OpResult, SweepReport


class TestOpResult:
    """Tests for OpResult."""

    def test_truthiness_follows_success(self) -> None:
        """Results can be used as booleans."""
        assert OpResult.ok("/a")
        assert not OpResult.failed("/a", "nope")

    def test_failed_keeps_error_text(self) -> None:
        """The error message is stored as a string."""
        result = OpResult.failed("/a", OSError("disk full"))

        assert result.error == "disk full"
        assert result.path == "/a"

    def test_frozen(self) -> None:
        """OpResult is immutable."""
        result = OpResult.ok("/a")
        with pytest.raises(AttributeError):
            result.success = False  # type: ignore[misc]


class TestReports:
    """Tests for aggregate reports."""

    def test_copy_tree_result_truthiness(self) -> None:
        """CopyTreeResult is falsy when it failed."""
        assert CopyTreeResult(source="/s", target="/t", success=True)
        assert not CopyTreeResult(source="/s", target="/t", success=False)

    def test_clear_report_success_without_failures(self) -> None:
        """A ClearReport without failures is successful."""
        report = ClearReport(path="/p")
        assert report.success is True

        report.failures.append(OpResult.failed("/p/x", "locked"))
        assert report.success is False
        assert not report

    def test_sweep_report_defaults(self) -> None:
        """A new SweepReport is empty and successful."""
        report = SweepReport()

        assert report.roots == []
        assert report.deleted == []
        assert report


class TestSinks:
    """Tests for failure sinks."""

    def test_log_failure_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """The default sink logs at WARNING level."""
        with caplog.at_level(logging.WARNING, logger="scratchkeep.ops.diagnostics"):
            log_failure("delete_file", "/tmp/x", OSError("busy"))

        assert "delete_file failed for /tmp/x: busy" in caplog.text

    def test_collecting_sink_records_in_order(self) -> None:
        """CollectingSink keeps failures in the order received."""
        sink = CollectingSink()
        first = OSError("one")

        sink("copy_file", "/a", first)
        sink("delete_file", "/b", OSError("two"))

        assert sink.paths == ["/a", "/b"]
        assert sink.failures[0].operation == "copy_file"
        assert sink.failures[0].error is first

    def test_empty_collecting_sink_is_truthy(self) -> None:
        """An empty sink is still used when passed as `sink or default`."""
        assert CollectingSink()
