"""Scratch root resolution.

This module maps configured scratch roots to physical directories.
"""

from scratchkeep.scratch.resolver import PathResolver, ScratchRootError, ScratchRootKind

__all__ = [
    "PathResolver",
    "ScratchRootError",
    "ScratchRootKind",
]
