"""Unit tests for PathResolver.

Tests scratch root resolution, lazy directory creation, and the
errors raised when a root cannot be provided.
"""

import errno
from pathlib import Path
from unittest.mock import patch

import pytest
from scratchkeep.core.config import ScratchConfig
from scratchkeep.scratch.resolver import PathResolver, ScratchRootError, ScratchRootKind


class TestPathResolver:
    """Tests for PathResolver."""

    def test_temp_dir_is_created(self, tmp_path: Path) -> None:
        """The global root is created under app_root on first use."""
        resolver = PathResolver(ScratchConfig(app_root=tmp_path))

        path = resolver.temp_dir()

        assert path == tmp_path / "_temp"
        assert path.is_dir()

    def test_subdirectory_is_created(self, resolver: PathResolver) -> None:
        """A subdirectory is created and returned."""
        path = resolver.temp_dir("uploads")

        assert path.name == "uploads"
        assert path.parent == resolver.root_path(ScratchRootKind.GLOBAL)
        assert path.is_dir()

    def test_empty_subdirectory_returns_root(self, resolver: PathResolver) -> None:
        """An empty subdirectory name means the root itself."""
        assert resolver.temp_dir("") == resolver.temp_dir()

    def test_existing_directory_is_reused(self, tmp_path: Path) -> None:
        """Resolving twice returns the same directory and keeps its contents."""
        resolver = PathResolver(ScratchConfig(app_root=tmp_path))
        first = resolver.temp_dir("jobs")
        (first / "marker").write_text("x")

        second = resolver.temp_dir("jobs")

        assert second == first
        assert (second / "marker").exists()

    def test_absolute_temp_directory(self, tmp_path: Path) -> None:
        """An absolute temp_directory ignores app_root."""
        elsewhere = tmp_path / "elsewhere" / "scratch"
        resolver = PathResolver(
            ScratchConfig(app_root=tmp_path / "app", temp_directory=elsewhere)
        )

        assert resolver.temp_dir() == elsewhere

    def test_tenant_temp_dir(self, resolver: PathResolver, scratch_config: ScratchConfig) -> None:
        """The tenant root is <tenant_path>/_temp."""
        path = resolver.tenant_temp_dir("exports")

        assert path == scratch_config.app_root / "tenants" / "default" / "_temp" / "exports"
        assert path.is_dir()

    def test_unconfigured_tenant_raises(self, tmp_path: Path) -> None:
        """Resolving a tenant root without a tenant path is an error."""
        resolver = PathResolver(ScratchConfig(app_root=tmp_path))

        with pytest.raises(ScratchRootError, match="tenant"):
            resolver.tenant_temp_dir()

    def test_creation_failure_propagates(self, resolver: PathResolver) -> None:
        """A directory that cannot be created raises ScratchRootError."""
        with (
            patch.object(Path, "mkdir", side_effect=PermissionError(errno.EACCES, "denied")),
            pytest.raises(ScratchRootError) as exc_info,
        ):
            resolver.temp_dir()

        assert exc_info.value.errno == errno.EACCES
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_creation_failure_is_an_os_error(self, tmp_path: Path) -> None:
        """ScratchRootError can be caught as OSError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file where the root should be")
        resolver = PathResolver(ScratchConfig(app_root=blocker))

        with pytest.raises(OSError):
            resolver.temp_dir()

    def test_configured_kinds(self, resolver: PathResolver, tmp_path: Path) -> None:
        """Tenant is only listed when a tenant path is configured."""
        assert resolver.configured_kinds() == [ScratchRootKind.GLOBAL, ScratchRootKind.TENANT]

        single = PathResolver(ScratchConfig(app_root=tmp_path))
        assert single.configured_kinds() == [ScratchRootKind.GLOBAL]

    def test_root_path_does_not_create(self, resolver: PathResolver) -> None:
        """root_path only computes the path."""
        path = resolver.root_path(ScratchRootKind.GLOBAL)

        assert path is not None
        assert not path.exists()

    def test_resolvers_are_independent(self, tmp_path: Path) -> None:
        """Each resolver uses only its own config."""
        a = PathResolver(ScratchConfig(app_root=tmp_path / "a"))
        b = PathResolver(ScratchConfig(app_root=tmp_path / "b"))

        assert a.temp_dir() != b.temp_dir()
        assert a.config.app_root == tmp_path / "a"
