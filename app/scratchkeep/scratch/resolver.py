"""Scratch root resolution.

Maps a scratch root kind to its physical directory using an injected
ScratchConfig, creating the directory (and an optional subdirectory) on
demand. Unlike the operations in :mod:`scratchkeep.ops`, failures here
are raised: a caller cannot continue without a usable scratch path.
"""

import logging
from enum import Enum
from pathlib import Path

from scratchkeep.core.config import ScratchConfig

logger = logging.getLogger(__name__)


class ScratchRootKind(str, Enum):
    """Kind of scratch root.

    Attributes:
        GLOBAL: Application-wide temp directory.
        TENANT: Temp directory of the current tenant.
    """

    GLOBAL = "global"
    TENANT = "tenant"


class ScratchRootError(OSError):
    """Raised when a scratch root cannot be resolved or created."""


class PathResolver:
    """Resolves scratch roots for one configuration.

    Attributes:
        _config: Scratch root configuration.
    """

    def __init__(self, config: ScratchConfig) -> None:
        """Initialize the PathResolver.

        Args:
            config: Configuration holding the scratch root base paths.
        """
        self._config = config

    @property
    def config(self) -> ScratchConfig:
        """The configuration this resolver was built with."""
        return self._config

    def root_path(self, kind: ScratchRootKind) -> Path | None:
        """Get the base path of a scratch root without creating it.

        Args:
            kind: Scratch root kind.

        Returns:
            The configured path, or None if no tenant path is configured.
        """
        if kind == ScratchRootKind.TENANT:
            return self._config.tenant_temp_path
        return self._config.global_temp_path

    def configured_kinds(self) -> list[ScratchRootKind]:
        """List the scratch root kinds that have a configured path."""
        return [kind for kind in ScratchRootKind if self.root_path(kind) is not None]

    def resolve(self, kind: ScratchRootKind, subdirectory: str | None = None) -> Path:
        """Get a scratch root, creating it if it doesn't exist.

        Args:
            kind: Scratch root kind.
            subdirectory: Optional subdirectory to create and return instead.

        Returns:
            Path to an existing directory.

        Raises:
            ScratchRootError: If the root is not configured or cannot be created.
        """
        base = self.root_path(kind)
        if base is None:
            msg = f"No base path configured for the {kind.value} scratch root"
            raise ScratchRootError(msg)

        path = _ensure_dir(base, kind)
        if subdirectory:
            path = _ensure_dir(path / subdirectory, kind)
        return path

    def temp_dir(self, subdirectory: str | None = None) -> Path:
        """Get the global scratch root (or a subdirectory of it)."""
        return self.resolve(ScratchRootKind.GLOBAL, subdirectory)

    def tenant_temp_dir(self, subdirectory: str | None = None) -> Path:
        """Get the tenant scratch root (or a subdirectory of it)."""
        return self.resolve(ScratchRootKind.TENANT, subdirectory)


def _ensure_dir(path: Path, kind: ScratchRootKind) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        kind: Scratch root kind, for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        ScratchRootError: If the directory cannot be created.
    """
    if path.is_dir():
        return path
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        msg = f"Cannot create {kind.value} scratch directory: {e.strerror or e}"
        raise ScratchRootError(e.errno, msg, str(path)) from e
    logger.debug("Created %s scratch directory %s", kind.value, path)
    return path
