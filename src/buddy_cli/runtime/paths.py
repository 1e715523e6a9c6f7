"""Canonical on-disk locations for pools and their artifacts.

Every function here is pure: nothing touches the filesystem, so callers may
compute locations before any directory exists.

Layout::

    <home>/pools/local/{agents,commands,shared}/...
    <home>/pools/<name>/.buddy/config.json
    <home>/pools/<name>/<agents|commands|context dir>/...
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

POOLS_DIRNAME = "pools"
LOCAL_POOL = "local"
INIT_MARKER = ".buddy-initialized"

CLAUDE_DIRNAME = ".claude"


class ArtifactKind(str, Enum):
    AGENT = "agents"
    COMMAND = "commands"
    SHARED = "shared"

    @property
    def label(self) -> str:
        """Human-readable category name used in messages."""
        return "shared context" if self is ArtifactKind.SHARED else self.value


def pools_root(home: Path) -> Path:
    """Return the container directory holding every pool."""
    return home / POOLS_DIRNAME


def pool_root(home: Path, name: str) -> Path:
    """Return the root directory of the pool called *name*."""
    return pools_root(home) / name


def local_pool_root(home: Path) -> Path:
    return pool_root(home, LOCAL_POOL)


def local_artifact_dir(home: Path, kind: ArtifactKind) -> Path:
    """Return the fixed artifact directory of the default ``local`` pool.

    The local pool is never configured, so its layout is independent of
    any ``.buddy/config.json``.
    """
    return local_pool_root(home) / kind.value


def init_marker(home: Path) -> Path:
    return local_pool_root(home) / INIT_MARKER


def claude_project_dir(cwd: Path, kind: ArtifactKind) -> Path:
    """Return ``<cwd>/.claude/<kind>`` (project-scoped editor directory)."""
    return cwd / CLAUDE_DIRNAME / kind.value


def claude_personal_dir(user_home: Path, kind: ArtifactKind) -> Path:
    """Return ``~/.claude/<kind>`` (user-scoped editor directory)."""
    return user_home / CLAUDE_DIRNAME / kind.value
