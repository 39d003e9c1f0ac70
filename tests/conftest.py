"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest
from scratchkeep.core.config import ScratchConfig
from scratchkeep.ops.diagnostics import CollectingSink
from scratchkeep.scratch.resolver import PathResolver

# Fixed reference time for age-based tests
NOW = datetime(2026, 3, 14, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """Fixed, timezone-aware reference time."""
    return NOW


@pytest.fixture
def scratch_config(tmp_path: Path) -> ScratchConfig:
    """Config with both scratch roots under tmp_path/app."""
    return ScratchConfig(
        app_root=tmp_path / "app",
        temp_directory=Path("_temp"),
        tenant_path=Path("tenants/default"),
    )


@pytest.fixture
def resolver(scratch_config: ScratchConfig) -> PathResolver:
    """PathResolver over the tmp_path scratch config."""
    return PathResolver(scratch_config)


@pytest.fixture
def sink() -> CollectingSink:
    """Failure sink that records everything it receives."""
    return CollectingSink()


@pytest.fixture
def make_tree() -> Callable[[Path, dict[str, str]], Path]:
    """Build a directory tree from a mapping of relative file paths to contents."""

    def _make(root: Path, files: dict[str, str]) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return root

    return _make


@pytest.fixture
def set_mtime() -> Callable[[Path, datetime], None]:
    """Set a file's access and modification time."""

    def _set(path: Path, when: datetime) -> None:
        timestamp = when.timestamp()
        os.utime(path, (timestamp, timestamp))

    return _set
