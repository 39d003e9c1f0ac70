"""scratchkeep - Best-effort scratch space and filesystem maintenance.

Locates and creates scratch directories, sweeps stale temporary files,
copies and clears directory trees without letting filesystem failures
escape into the calling workflow.
"""

__version__ = "0.1.0"
