"""DevOps tasks for scratchkeep.

Usage: uv run devops.py <task>
Tasks: fmt, test, clean
"""

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent

# Tool caches and build output removed by `clean`
CLEAN_DIRS = [".pytest_cache", ".ruff_cache", ".mypy_cache", "build", "dist", "htmlcov"]


def _run(commands: list[list[str]]) -> None:
    """Execute a sequence of shell commands, exiting on first failure."""
    for cmd in commands:
        try:
            subprocess.run(cmd, check=True)  # nosec: B603, B607
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {' '.join(e.cmd)}", file=sys.stderr)
            sys.exit(e.returncode)


def format_code() -> None:
    """Format the codebase with Ruff."""
    print("🎨 [Native Task] Formatting with Ruff...\n")
    _run([["ruff", "format", "."], ["ruff", "check", "--fix", "."]])


def test() -> None:
    """Run tests with PyTest."""
    print("🧪 [Native Task] Testing with PyTest...\n")
    _run([["uv", "run", "pytest", "-q"]])


def clean() -> None:
    """Remove caches and build artifacts using scratchkeep itself."""
    from scratchkeep.ops.tree import clear_directory

    print("🧹 [Native Task] Cleaning the Project...\n")
    targets = [ROOT / name for name in CLEAN_DIRS]
    targets += [p for p in ROOT.rglob("__pycache__") if p.is_dir()]
    targets += [p for p in ROOT.rglob("*.egg-info") if p.is_dir()]

    left_behind = 0
    for target in targets:
        if target.exists():
            left_behind += len(clear_directory(target, remove_self=True).failures)

    if left_behind:
        print(f"\n🟠 {left_behind} path(s) could not be removed.")
    else:
        print("\n🟢 Caches & Artifacts → ✅ All fresh now")


TASKS = {"fmt": format_code, "test": test, "clean": clean}


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    TASKS[sys.argv[1]]()
