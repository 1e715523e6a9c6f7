"""Thin wrapper around the ``git`` executable.

Clone and pull are blocking and carry no timeout: an unresponsive remote
blocks the invocation, which is acceptable for an interactive CLI.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from buddy_cli.errors import GitCommandError

logger = logging.getLogger(__name__)

__all__ = [
    "GitResult",
    "clone",
    "get_origin_url",
    "has_git_marker",
    "pull",
    "run_git",
]


@dataclass
class GitResult:
    returncode: int
    stdout: str
    stderr: str


def run_git(args: list[str], cwd: Path | None = None, timeout: int | None = None) -> GitResult:
    """Run git and normalize failure shape for deterministic handling."""
    logger.debug("Running git %s (cwd=%s)", " ".join(args), cwd)
    try:
        completed = subprocess.run(
            ["git", *args],
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout,
        )
    except FileNotFoundError:
        return GitResult(returncode=127, stdout="", stderr="git executable not found on PATH")
    except subprocess.TimeoutExpired:
        return GitResult(returncode=124, stdout="", stderr=f"git command timed out: git {' '.join(args)}")
    return GitResult(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )


def _check(args: list[str], cwd: Path | None = None) -> GitResult:
    result = run_git(args, cwd=cwd)
    if result.returncode != 0:
        raise GitCommandError(args, result.returncode, result.stderr)
    return result


def has_git_marker(repo_dir: Path) -> bool:
    """Return True when *repo_dir* holds a git checkout (``.git/config``)."""
    return (repo_dir / ".git" / "config").is_file()


def get_origin_url(repo_dir: Path) -> str:
    """Return the configured ``remote.origin.url`` or "" when unset."""
    result = run_git(["config", "--get", "remote.origin.url"], cwd=repo_dir, timeout=15)
    if result.returncode != 0:
        return ""
    return result.stdout.strip()


def clone(url: str, destination: Path) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    _check(["clone", url, str(destination)])


def pull(repo_dir: Path) -> None:
    _check(["pull"], cwd=repo_dir)
