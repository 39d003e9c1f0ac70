"""Collision-free directory names."""

import os
import uuid

from scratchkeep.ops.files import StrPath, is_blank_path

# Upper bound on probes, so a pathological parent cannot loop forever
MAX_NAME_ATTEMPTS = 999_999


def allocate_unique_name(parent: StrPath | None, desired_name: str | None = None) -> str:
    """Find a name that does not exist yet under parent.

    Probes ``desired_name``, ``desired_name1``, ``desired_name2``, ... and
    returns the first that is free. If no free name turns up within
    MAX_NAME_ATTEMPTS, the last candidate is returned anyway.

    Args:
        parent: Directory the name is meant for.
        desired_name: Preferred name. A random UUID is used if empty.

    Returns:
        The name (not the full path). If parent is empty or missing,
        the base name is returned unchanged.
    """
    base = desired_name or str(uuid.uuid4())

    if is_blank_path(parent) or not os.path.isdir(parent):  # type: ignore[arg-type]
        return base

    candidate = base
    for suffix in range(1, MAX_NAME_ATTEMPTS):
        if not os.path.lexists(os.path.join(parent, candidate)):  # type: ignore[arg-type]
            return candidate
        candidate = f"{base}{suffix}"

    return candidate
