"""Runtime locations for buddy: the home root and pool layout."""

from buddy_cli.runtime.home import BUDDY_HOME_ENV, get_buddy_home
from buddy_cli.runtime.paths import (
    LOCAL_POOL,
    ArtifactKind,
    claude_personal_dir,
    claude_project_dir,
    init_marker,
    local_artifact_dir,
    local_pool_root,
    pool_root,
    pools_root,
)

__all__ = [
    "BUDDY_HOME_ENV",
    "LOCAL_POOL",
    "ArtifactKind",
    "claude_personal_dir",
    "claude_project_dir",
    "get_buddy_home",
    "init_marker",
    "local_artifact_dir",
    "local_pool_root",
    "pool_root",
    "pools_root",
]
