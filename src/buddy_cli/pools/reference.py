"""Parsing of symbolic ``<pool>/<relative path>`` artifact references."""

from __future__ import annotations

from dataclasses import dataclass

from buddy_cli.errors import InvalidReferenceError
from buddy_cli.runtime.paths import LOCAL_POOL


@dataclass(frozen=True)
class ArtifactReference:
    """A parsed artifact reference.

    ``relative_path`` carries no extension and may contain ``/``;
    ``leaf_name`` is its final segment.
    """

    pool: str
    relative_path: str
    leaf_name: str

    def __str__(self) -> str:
        return f"{self.pool}/{self.relative_path}"


def parse_reference(source: str) -> ArtifactReference:
    """Split *source* into pool name, relative path and leaf name.

    ``"pool/a/b"`` names ``a/b`` in ``pool``. A string without ``/`` names an
    artifact in the ``local`` pool.

    Raises:
        InvalidReferenceError: If the relative path or leaf name is empty,
            or a segment would escape the pool directory.
    """
    if "/" in source:
        pool, relative_path = source.split("/", 1)
    else:
        pool, relative_path = LOCAL_POOL, source

    if not pool:
        raise InvalidReferenceError(f"Invalid reference '{source}': missing pool name")

    segments = relative_path.split("/")
    leaf_name = segments[-1]
    if not relative_path or not leaf_name:
        raise InvalidReferenceError(
            f"Invalid reference '{source}': expected <pool>/<name>, got an empty name"
        )
    if not segments[0]:
        raise InvalidReferenceError(f"Invalid reference '{source}': absolute paths are not allowed")
    if ".." in segments or pool in (".", ".."):
        raise InvalidReferenceError(f"Invalid reference '{source}': '..' is not allowed")

    return ArtifactReference(pool=pool, relative_path=relative_path, leaf_name=leaf_name)


__all__ = ["ArtifactReference", "parse_reference"]
