from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


def run(cmd: list[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    return subprocess.run(cmd, cwd=cwd, check=True, capture_output=True, text=True)


def write_file(path: Path, content: str = "placeholder") -> Path:
    """Create a file (and any missing parent dirs), return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def make_clone(repo_dir: Path, origin: str | None) -> Path:
    """Create a git checkout at *repo_dir* with the given origin URL."""
    repo_dir.mkdir(parents=True, exist_ok=True)
    run(["git", "init", "-q"], cwd=repo_dir)
    if origin is not None:
        run(["git", "remote", "add", "origin", origin], cwd=repo_dir)
    write_file(repo_dir / "README.md", "# pool\n")
    return repo_dir
