"""Environment requirement checking utilities."""

import shutil
import subprocess
from pathlib import Path

from rich.console import Console

console = Console(stderr=True)


def git() -> bool:
    """Check if git is available, print error if missing, return True/False."""
    if shutil.which("git") is None:
        console.print("❌ [red]git not found. Install git to continue.[/red]")
        return False
    return True


def work_tree(cwd: Path | None = None) -> bool:
    """Check that the directory is inside a git working copy."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--is-inside-work-tree"],
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except (FileNotFoundError, NotADirectoryError):
        console.print(f"❌ [red]{cwd} is not a directory[/red]")
        return False
    if result.returncode != 0 or result.stdout.strip() != "true":
        console.print(
            f"❌ [red]Not a git repository: {cwd or Path.cwd()}[/red]"
        )
        return False
    return True
