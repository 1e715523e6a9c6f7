"""Exception hierarchy for buddy commands.

Malformed pool configuration has no exception: it is recovered
silently by the config loader and never surfaces as an error.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class BuddyError(RuntimeError):
    """Base class for every user-facing buddy failure."""


class InvalidReferenceError(BuddyError):
    """Raised when a symbolic ``<pool>/<path>`` reference cannot be used."""


class ArtifactNotFoundError(BuddyError):
    """Raised when no extension-fallback candidate exists on disk."""

    def __init__(self, label: str, candidates: Sequence[Path]) -> None:
        self.label = label
        self.candidates = tuple(candidates)
        tried = ", ".join(str(candidate) for candidate in self.candidates)
        super().__init__(f"{label} file not found. Tried: {tried}")


class ReadmeImportError(BuddyError):
    """Raised when importing a README without ``--force``."""

    hint = "If you *really* want to import a README file, use --force"

    def __init__(self) -> None:
        super().__init__(
            "Really? A README file? Maybe try opening it in a web browser like a normal person."
        )


class SourceNotFoundError(BuddyError):
    """Raised when a file to be copied into a pool does not exist."""

    def __init__(self, label: str, path: Path) -> None:
        self.path = path
        super().__init__(f"{label} file not found: {path}")


class PoolNotFoundError(BuddyError):
    """Raised when a named pool has no directory under the pools root."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Pool '{name}' not found")


class ProtocolRejectedError(BuddyError):
    """Raised when a source URL uses a scheme buddy will not fetch.

    ``kind`` is one of ``insecure``, ``unimplemented``, ``unsupported`` or
    ``invalid``.
    """

    def __init__(self, reason: str, kind: str) -> None:
        self.reason = reason
        self.kind = kind
        super().__init__(reason)


class RepoCollisionError(BuddyError):
    """Raised when a pool name is taken by a directory with another origin."""

    def __init__(self, name: str, existing_origin: str | None, requested_url: str) -> None:
        self.name = name
        self.existing_origin = existing_origin
        self.requested_url = requested_url
        if existing_origin is None:
            message = f"Directory '{name}' exists but is not a git repository"
        else:
            message = (
                f"Repository name '{name}' already exists in pool\n"
                f"   Existing origin: {existing_origin or '(none)'}\n"
                f"   Requested URL: {requested_url}"
            )
        super().__init__(message)


class GitCommandError(BuddyError):
    """Raised when the external ``git`` process fails."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str) -> None:
        self.args_used = tuple(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"exit code {returncode}"
        super().__init__(f"git {' '.join(self.args_used)} failed: {detail}")


__all__ = [
    "ArtifactNotFoundError",
    "BuddyError",
    "GitCommandError",
    "InvalidReferenceError",
    "PoolNotFoundError",
    "ProtocolRejectedError",
    "ReadmeImportError",
    "RepoCollisionError",
    "SourceNotFoundError",
]
