"""Scratch root configuration and settings.

This module provides the configuration model and I/O functions for the
scratch roots managed by scratchkeep. A ``ScratchConfig`` is handed to a
``PathResolver`` at construction; nothing in the library reads it from a
process-wide location.

Configuration is stored in ~/.config/scratchkeep/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from scratchkeep.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_TEMP_DIRECTORY = Path("_temp")
TENANT_TEMP_DIRECTORY = "_temp"


class ScratchConfig(BaseModel):
    """Configuration for scratch roots.

    Attributes:
        app_root: Application root that relative paths are resolved against.
        temp_directory: Global scratch root (relative to app_root unless absolute).
        tenant_path: Base path of the current tenant, supplied by the
            multi-tenancy context. None if the application is single-tenant.
    """

    model_config = ConfigDict(extra="forbid")

    app_root: Path = Field(
        default_factory=Path.cwd,
        description="Application root for relative paths",
    )
    temp_directory: Annotated[
        Path,
        Field(description="Global scratch root"),
    ] = DEFAULT_TEMP_DIRECTORY
    tenant_path: Annotated[
        Path | None,
        Field(description="Tenant base path (None = no tenant scratch root)"),
    ] = None

    @property
    def global_temp_path(self) -> Path:
        """Physical path of the global scratch root."""
        if self.temp_directory.is_absolute():
            return self.temp_directory
        return self.app_root / self.temp_directory

    @property
    def tenant_temp_path(self) -> Path | None:
        """Physical path of the tenant scratch root, if a tenant is configured."""
        if self.tenant_path is None:
            return None
        tenant = self.tenant_path
        if not tenant.is_absolute():
            tenant = self.app_root / tenant
        return tenant / TENANT_TEMP_DIRECTORY


class ScratchConfigError(Exception):
    """Base exception for scratch configuration errors."""


class ScratchConfigNotFoundError(ScratchConfigError):
    """Raised when the config file is not found."""


class ScratchConfigParseError(ScratchConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ScratchConfig:
    """Load scratch configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ScratchConfig object.

    Raises:
        ScratchConfigNotFoundError: If the config file doesn't exist.
        ScratchConfigParseError: If the TOML syntax is invalid.
        ScratchConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ScratchConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ScratchConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ScratchConfigError(f"Failed to read config: {e}") from e

    try:
        return ScratchConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ScratchConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> ScratchConfig:
    """Load the config file, falling back to defaults if it doesn't exist.

    Parse and validation errors still propagate.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded or default ScratchConfig.
    """
    try:
        return load_config(path)
    except ScratchConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return ScratchConfig()


def save_config(config: ScratchConfig, path: Path | None = None) -> Path:
    """Save scratch configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The ScratchConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ScratchConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ScratchConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: ScratchConfig) -> dict[str, object]:
    """Convert ScratchConfig to a dictionary for TOML serialization.

    TOML has no null, so an unset tenant path is omitted.

    Args:
        config: The ScratchConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {
        "app_root": str(config.app_root),
        "temp_directory": str(config.temp_directory),
    }

    if config.tenant_path is not None:
        result["tenant_path"] = str(config.tenant_path)

    return result
