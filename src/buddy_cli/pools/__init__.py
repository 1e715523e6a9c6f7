"""Pool configuration, artifact lookup, repository identity and use cases."""

from buddy_cli.pools.config import LOCAL_POOL_CONFIG, PoolConfig, find_buddy_config, load_pool_config, resolve_pool
from buddy_cli.pools.identity import (
    RepoInspection,
    RepoState,
    extract_repo_name,
    inspect_pool_dir,
    normalize_origin,
    validate_url_protocol,
)
from buddy_cli.pools.locator import Found, NotFound, ResolvedArtifact, locate_artifact, resolve_artifact
from buddy_cli.pools.operations import (
    CopyOutcome,
    CopyStatus,
    ImportTarget,
    ListOutcome,
    PoolOperations,
    RepoAction,
    RepoOutcome,
)
from buddy_cli.pools.reference import ArtifactReference, parse_reference

__all__ = [
    "LOCAL_POOL_CONFIG",
    "ArtifactReference",
    "CopyOutcome",
    "CopyStatus",
    "Found",
    "ImportTarget",
    "ListOutcome",
    "NotFound",
    "PoolConfig",
    "PoolOperations",
    "RepoAction",
    "RepoInspection",
    "RepoOutcome",
    "RepoState",
    "ResolvedArtifact",
    "extract_repo_name",
    "find_buddy_config",
    "inspect_pool_dir",
    "load_pool_config",
    "locate_artifact",
    "normalize_origin",
    "parse_reference",
    "resolve_artifact",
    "resolve_pool",
    "validate_url_protocol",
]
