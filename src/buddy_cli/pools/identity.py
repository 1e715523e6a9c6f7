"""Remote source validation and pool directory identity checks.

Before a repository is cloned into ``pools/<name>``, the target directory is
classified as one of:

- ABSENT          -- missing or empty; clone fresh
- MATCHING_CLONE  -- a git checkout whose origin equals the requested URL
                     (after normalization); pull in place
- COLLISION       -- anything else; never overwritten, merged or renamed

Protocol validation is a pure string check and never touches the network.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from urllib.parse import urlparse

from buddy_cli.core.git import get_origin_url, has_git_marker
from buddy_cli.errors import InvalidReferenceError, ProtocolRejectedError

logger = logging.getLogger(__name__)

UNKNOWN_REPO = "unknown-repo"

_REPO_SUFFIX = ".git"


class RepoState(Enum):
    ABSENT = "absent"
    MATCHING_CLONE = "matching_clone"
    COLLISION = "collision"


@dataclass(frozen=True)
class RepoInspection:
    """Classification of a candidate pool directory.

    ``existing_origin`` is None when the directory is absent or is not a git
    checkout, and "" when the checkout has no origin remote.
    """

    path: Path
    state: RepoState
    existing_origin: str | None = None


def is_url(source: str) -> bool:
    return "://" in source


def validate_url_protocol(url: str) -> str:
    """Return the accepted scheme (``https`` or ``file``) of *url*.

    Raises:
        ProtocolRejectedError: For insecure (``http``), unimplemented
            (``git``, ``ssh*``), unsupported, or unparseable URLs.
    """
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        raise ProtocolRejectedError("Invalid URL format", "invalid") from None

    scheme = parsed.scheme.lower()
    # Scheme-only forms such as "https:host/repo" carry no netloc and are
    # rejected here; "add" never routes them, since is_url requires "://".
    if not scheme or (scheme != "file" and not parsed.netloc):
        raise ProtocolRejectedError("Invalid URL format", "invalid")
    if scheme == "http":
        raise ProtocolRejectedError("TLS required, use HTTPS", "insecure")
    if scheme == "git" or scheme.startswith("ssh"):
        raise ProtocolRejectedError("Not implemented yet", "unimplemented")
    if scheme in ("https", "file"):
        return scheme
    raise ProtocolRejectedError(f"Unsupported protocol: {scheme}:", "unsupported")


def normalize_origin(url: str) -> str:
    """Normalize a remote URL for identity comparison.

    Strips surrounding whitespace and a trailing ``.git`` suffix, then
    lowercases. ``https://Host/Org/Repo.git`` and ``https://host/org/repo``
    normalize to the same value.
    """
    cleaned = url.strip()
    if cleaned.lower().endswith(_REPO_SUFFIX):
        cleaned = cleaned[: -len(_REPO_SUFFIX)]
    return cleaned.lower()


def same_origin(left: str, right: str) -> bool:
    return normalize_origin(left) == normalize_origin(right)


def extract_repo_name(url: str) -> str:
    """Derive a pool name from the last path segment of *url*."""
    try:
        path = urlparse(url).path
    except ValueError:
        return UNKNOWN_REPO
    last = path.split("/")[-1]
    if last.endswith(_REPO_SUFFIX):
        last = last[: -len(_REPO_SUFFIX)]
    return last or UNKNOWN_REPO


def validate_pool_name(name: str) -> str:
    """Return *name* if it is usable as a single pool directory name."""
    cleaned = name.strip()
    if not cleaned or cleaned in (".", "..") or "/" in cleaned or "\\" in cleaned:
        raise InvalidReferenceError(f"Invalid pool name '{name}'")
    return cleaned


def inspect_pool_dir(
    path: Path,
    requested_url: str,
    origin_reader: Callable[[Path], str] = get_origin_url,
) -> RepoInspection:
    """Classify *path* as absent, a matching clone of *requested_url*, or a collision."""
    if not path.exists():
        return RepoInspection(path=path, state=RepoState.ABSENT)

    if not path.is_dir():
        return RepoInspection(path=path, state=RepoState.COLLISION)

    if not has_git_marker(path):
        if not any(path.iterdir()):
            return RepoInspection(path=path, state=RepoState.ABSENT)
        return RepoInspection(path=path, state=RepoState.COLLISION)

    existing_origin = origin_reader(path)
    if existing_origin and same_origin(existing_origin, requested_url):
        return RepoInspection(path=path, state=RepoState.MATCHING_CLONE, existing_origin=existing_origin)

    logger.debug("Origin mismatch at %s: %r != %r", path, existing_origin, requested_url)
    return RepoInspection(path=path, state=RepoState.COLLISION, existing_origin=existing_origin)


__all__ = [
    "RepoInspection",
    "RepoState",
    "UNKNOWN_REPO",
    "extract_repo_name",
    "inspect_pool_dir",
    "is_url",
    "normalize_origin",
    "same_origin",
    "validate_pool_name",
    "validate_url_protocol",
]
