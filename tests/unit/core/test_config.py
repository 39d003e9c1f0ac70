"""Unit tests for ScratchConfig and related functions.

Tests for the configuration module that provides the Pydantic model
and TOML I/O for scratch root settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError
from scratchkeep.core.config import (
    ScratchConfig,
    ScratchConfigError,
    ScratchConfigNotFoundError,
    ScratchConfigParseError,
    load_config,
    load_config_or_default,
    save_config,
)


class TestScratchConfig:
    """Tests for ScratchConfig Pydantic model."""

    def test_default_values(self) -> None:
        """ScratchConfig has correct default values."""
        config = ScratchConfig()

        assert config.app_root == Path.cwd()
        assert config.temp_directory == Path("_temp")
        assert config.tenant_path is None
        assert config.tenant_temp_path is None

    def test_global_temp_path_is_relative_to_app_root(self, tmp_path: Path) -> None:
        """A relative temp_directory is resolved against app_root."""
        config = ScratchConfig(app_root=tmp_path, temp_directory=Path("data/_temp"))

        assert config.global_temp_path == tmp_path / "data" / "_temp"

    def test_tenant_temp_path(self, tmp_path: Path) -> None:
        """The tenant root is the tenant path plus _temp."""
        config = ScratchConfig(app_root=tmp_path, tenant_path=Path("/srv/tenants/acme"))

        assert config.tenant_temp_path == Path("/srv/tenants/acme/_temp")

    def test_relative_tenant_path(self, tmp_path: Path) -> None:
        """A relative tenant path is resolved against app_root."""
        config = ScratchConfig(app_root=tmp_path, tenant_path=Path("tenants/acme"))

        assert config.tenant_temp_path == tmp_path / "tenants" / "acme" / "_temp"

    def test_extra_fields_forbidden(self) -> None:
        """Unknown settings are rejected."""
        with pytest.raises(ValidationError):
            ScratchConfig(retention_hours=3)  # type: ignore[call-arg]


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_valid(self, tmp_path: Path) -> None:
        """A valid file is loaded."""
        path = tmp_path / "config.toml"
        path.write_text('app_root = "/srv/app"\ntenant_path = "tenants/acme"\n')

        config = load_config(path)

        assert config.app_root == Path("/srv/app")
        assert config.tenant_path == Path("tenants/acme")
        assert config.temp_directory == Path("_temp")

    def test_not_found(self, tmp_path: Path) -> None:
        """A missing file raises ScratchConfigNotFoundError."""
        with pytest.raises(ScratchConfigNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ScratchConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("app_root = [unterminated")

        with pytest.raises(ScratchConfigParseError):
            load_config(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ScratchConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('unknown_key = "x"\n')

        with pytest.raises(ScratchConfigError, match="Invalid config content"):
            load_config(path)

    def test_load_or_default_without_file(self, tmp_path: Path) -> None:
        """A missing file falls back to defaults."""
        config = load_config_or_default(tmp_path / "missing.toml")

        assert config == ScratchConfig(app_root=config.app_root)
        assert config.tenant_path is None

    def test_load_or_default_still_raises_parse_errors(self, tmp_path: Path) -> None:
        """Only a missing file is tolerated."""
        path = tmp_path / "config.toml"
        path.write_text("= nope")

        with pytest.raises(ScratchConfigParseError):
            load_config_or_default(path)


class TestSaveConfig:
    """Tests for save_config."""

    def test_save_and_reload(self, tmp_path: Path) -> None:
        """A saved config loads back to the same values."""
        config = ScratchConfig(
            app_root=tmp_path,
            temp_directory=Path("scratch"),
            tenant_path=Path("tenants/acme"),
        )
        path = tmp_path / "nested" / "config.toml"

        saved = save_config(config, path)

        assert saved == path
        assert load_config(path) == config

    def test_unset_tenant_is_omitted(self, tmp_path: Path) -> None:
        """TOML has no null; an unset tenant path is left out."""
        path = tmp_path / "config.toml"

        save_config(ScratchConfig(app_root=tmp_path), path)

        assert "tenant_path" not in path.read_text()

    def test_no_temp_files_left_behind(self, tmp_path: Path) -> None:
        """The atomic write leaves only the config file."""
        path = tmp_path / "config.toml"

        save_config(ScratchConfig(app_root=tmp_path), path)

        assert [p.name for p in tmp_path.iterdir()] == ["config.toml"]
