"""Extension-fallback lookup of artifacts inside a pool.

Candidate order:

- configured extension ``E``: ``<path>.E`` then ``<path>``
- no configured extension:    ``<path>.md``, ``<path>.txt``, then ``<path>``

The first candidate that is a readable file wins. When none is, the result
carries every candidate in the order it was tried so callers can show the
user exactly what was searched.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from buddy_cli.errors import ArtifactNotFoundError
from buddy_cli.pools.config import resolve_pool
from buddy_cli.pools.reference import ArtifactReference
from buddy_cli.runtime.paths import ArtifactKind

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = ("md", "txt")


@dataclass(frozen=True)
class Found:
    path: Path
    tried: tuple[Path, ...] = ()


@dataclass(frozen=True)
class NotFound:
    candidates: tuple[Path, ...]


ResolvedArtifact = Found | NotFound


def candidate_paths(base: Path, relative_path: str, extension: str | None = None) -> list[Path]:
    """Return the ordered lookup candidates for *relative_path* under *base*.

    Segments are joined one at a time, so a leading or doubled ``/`` never
    re-roots a candidate outside *base*.
    """
    extensions = (extension,) if extension is not None else DEFAULT_EXTENSIONS
    *parents, leaf = [segment for segment in relative_path.split("/") if segment] or [""]
    directory = base.joinpath(*parents)
    candidates = [directory / f"{leaf}.{ext}" for ext in extensions]
    candidates.append(directory / leaf)
    return candidates


def _is_readable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


def locate_artifact(base: Path, relative_path: str, extension: str | None = None) -> ResolvedArtifact:
    """Find the first existing candidate for *relative_path* under *base*.

    Args:
        base: Directory the relative path is resolved against.
        relative_path: Artifact path without extension (may contain ``/``).
        extension: Pool-configured extension, or None for the default chain.

    Returns:
        Found with the winning path, or NotFound listing every candidate.
    """
    tried: list[Path] = []
    for candidate in candidate_paths(base, relative_path, extension):
        if _is_readable_file(candidate):
            logger.debug("Resolved %s -> %s", relative_path, candidate)
            return Found(path=candidate, tried=tuple(tried))
        tried.append(candidate)
    return NotFound(candidates=tuple(tried))


def resolve_artifact(home: Path, reference: ArtifactReference, kind: ArtifactKind) -> Path:
    """Resolve *reference* to a file using its pool's configuration.

    Raises:
        ArtifactNotFoundError: If no candidate exists.
    """
    root, config = resolve_pool(home, reference.pool)
    base = root / config.directory_for(kind)
    result = locate_artifact(base, reference.relative_path, config.extension)
    if isinstance(result, NotFound):
        label = "Context" if kind is ArtifactKind.SHARED else kind.value[:-1].capitalize()
        raise ArtifactNotFoundError(label, result.candidates)
    return result.path


__all__ = [
    "DEFAULT_EXTENSIONS",
    "Found",
    "NotFound",
    "ResolvedArtifact",
    "candidate_paths",
    "locate_artifact",
    "resolve_artifact",
]
