"""Per-pool configuration stored in ``<pool>/.buddy/config.json``.

Loading is read-or-default: a missing or malformed file yields the default
configuration, and each field falls back to its own default when it is
missing or has the wrong shape. Only I/O failures such as permission errors
propagate.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any

from buddy_cli.pools.identity import validate_pool_name
from buddy_cli.runtime.paths import LOCAL_POOL, ArtifactKind, pool_root

logger = logging.getLogger(__name__)

CONFIG_DIRNAME = ".buddy"
CONFIG_FILENAME = "config.json"

DEFAULT_AGENTS_DIR = ""
DEFAULT_COMMANDS_DIR = "commands"
DEFAULT_CONTEXT_DIR = "shared"


@dataclass(frozen=True)
class PoolConfig:
    """Directory layout and extension policy for one pool.

    Attributes:
        agents: Agents directory relative to the pool root ("" is the root).
        commands: Commands directory relative to the pool root.
        context: Shared-context directory relative to the pool root.
        extension: Single configured extension, or None for the
            ``.md`` -> ``.txt`` -> bare fallback.
        pools: Accepted for compatibility; not consumed.
    """

    agents: str = DEFAULT_AGENTS_DIR
    commands: str = DEFAULT_COMMANDS_DIR
    context: str = DEFAULT_CONTEXT_DIR
    extension: str | None = None
    pools: str | None = None

    def directory_for(self, kind: ArtifactKind) -> str:
        if kind is ArtifactKind.AGENT:
            return self.agents
        if kind is ArtifactKind.COMMAND:
            return self.commands
        return self.context

    @classmethod
    def from_dict(cls, data: Any) -> PoolConfig:
        if not isinstance(data, dict):
            return cls()

        extension = data.get("extension")
        if isinstance(extension, str) and extension.strip().lstrip("."):
            extension = extension.strip().lstrip(".")
        else:
            extension = None

        pools = data.get("pools")
        return cls(
            agents=_relative_dir(data.get("agents"), DEFAULT_AGENTS_DIR),
            commands=_relative_dir(data.get("commands"), DEFAULT_COMMANDS_DIR),
            context=_relative_dir(data.get("context"), DEFAULT_CONTEXT_DIR),
            extension=extension,
            pools=pools if isinstance(pools, str) else None,
        )


# The default pool has a fixed layout and ignores any config file.
LOCAL_POOL_CONFIG = PoolConfig(
    agents=ArtifactKind.AGENT.value,
    commands=ArtifactKind.COMMAND.value,
    context=ArtifactKind.SHARED.value,
)


def _relative_dir(value: Any, default: str) -> str:
    """Return *value* when it is a pool-relative directory, else *default*."""
    if not isinstance(value, str):
        return default
    candidate = value.strip()
    if not candidate:
        return ""
    path = PurePosixPath(candidate.replace("\\", "/"))
    if path.is_absolute() or ".." in path.parts or ":" in candidate:
        logger.debug("Ignoring pool directory %r outside the pool root", value)
        return default
    return path.as_posix()


def config_path(root: Path) -> Path:
    return root / CONFIG_DIRNAME / CONFIG_FILENAME


def load_pool_config(root: Path) -> PoolConfig:
    """Load the configuration of the pool rooted at *root*.

    Args:
        root: Pool root directory.

    Returns:
        PoolConfig with defaults applied for anything absent or malformed.

    Raises:
        OSError: If the file exists but cannot be read (e.g. permissions).
    """
    path = config_path(root)
    try:
        raw = path.read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
        return PoolConfig()

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.debug("Malformed pool config %s, using defaults: %s", path, exc)
        return PoolConfig()

    return PoolConfig.from_dict(data)


def resolve_pool(home: Path, name: str) -> tuple[Path, PoolConfig]:
    """Return the root directory and effective configuration of pool *name*.

    Raises:
        InvalidReferenceError: If *name* is not a single directory under ``pools/``.
    """
    validate_pool_name(name)
    root = pool_root(home, name)
    if name == LOCAL_POOL:
        return root, LOCAL_POOL_CONFIG
    return root, load_pool_config(root)


def find_buddy_config(start: Path, user_home: Path | None = None) -> Path | None:
    """Search upward from *start* for ``.buddy/config.json``.

    Every ancestor up to and including the filesystem root is checked, then
    the user's home directory as a final fallback.
    """
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = config_path(directory)
        if candidate.is_file():
            return candidate

    home = user_home if user_home is not None else Path.home()
    candidate = config_path(home)
    if candidate.is_file():
        return candidate
    return None


__all__ = [
    "CONFIG_DIRNAME",
    "CONFIG_FILENAME",
    "LOCAL_POOL_CONFIG",
    "PoolConfig",
    "config_path",
    "find_buddy_config",
    "load_pool_config",
    "resolve_pool",
]
