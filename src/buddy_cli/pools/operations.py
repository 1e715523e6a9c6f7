"""Pool use cases: init, add, import, list, and shared-context lookup.

``PoolOperations`` composes path resolution, pool configuration, artifact
lookup and repository identity with the external collaborators (overwrite
confirmation, file copy, git). It raises ``BuddyError`` subclasses and leaves
rendering and exit codes to the CLI layer.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from urllib.parse import unquote, urlparse

from rich.console import Console

from buddy_cli.core import git
from buddy_cli.errors import (
    BuddyError,
    PoolNotFoundError,
    ReadmeImportError,
    RepoCollisionError,
    SourceNotFoundError,
)
from buddy_cli.pools.config import resolve_pool
from buddy_cli.pools.identity import (
    RepoState,
    extract_repo_name,
    inspect_pool_dir,
    is_url,
    validate_pool_name,
    validate_url_protocol,
)
from buddy_cli.pools.locator import resolve_artifact
from buddy_cli.pools.reference import parse_reference
from buddy_cli.runtime.paths import (
    LOCAL_POOL,
    ArtifactKind,
    claude_personal_dir,
    claude_project_dir,
    init_marker,
    local_artifact_dir,
    local_pool_root,
    pool_root,
)

logger = logging.getLogger(__name__)

LISTED_SUFFIXES = (".md", ".txt")
ARTIFACT_SUFFIX = ".md"

ConfirmOverwrite = Callable[[str, str], bool]

_SOURCE_LABELS = {
    ArtifactKind.AGENT: "Agent",
    ArtifactKind.COMMAND: "Command",
    ArtifactKind.SHARED: "Shared context",
}


class CopyStatus(Enum):
    COPIED = "copied"
    CANCELLED = "cancelled"


class ImportTarget(Enum):
    """Where ``import`` writes the resolved artifact."""

    CURRENT = "current"
    PROJECT = "project"
    PERSONAL = "personal"


class RepoAction(Enum):
    CLONED = "cloned"
    UPDATED = "updated"


@dataclass(frozen=True)
class CopyOutcome:
    status: CopyStatus
    filename: str
    source: Path
    destination: Path
    location: str
    origin: str | None = None

    @property
    def copied(self) -> bool:
        return self.status is CopyStatus.COPIED


@dataclass(frozen=True)
class RepoOutcome:
    name: str
    path: Path
    action: RepoAction


@dataclass(frozen=True)
class ListOutcome:
    pool: str
    kind: ArtifactKind
    items: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class InitOutcome:
    path: Path
    created: bool


def _decline_overwrite(filename: str, location: str) -> bool:
    return False


class PoolOperations:
    """Entry point for every pool use case.

    Args:
        home: Buddy root directory (holds ``pools/``).
        cwd: Directory treated as the current project.
        user_home: Directory treated as the user's home for ``~/.claude``.
        confirm_overwrite: Called with (filename, location) before replacing
            an existing file; returning False cancels the copy.
        console: Receives progress messages for long-running git calls.
    """

    def __init__(
        self,
        home: Path,
        *,
        cwd: Path | None = None,
        user_home: Path | None = None,
        confirm_overwrite: ConfirmOverwrite | None = None,
        console: Console | None = None,
    ) -> None:
        self.home = home
        self.cwd = cwd if cwd is not None else Path.cwd()
        self.user_home = user_home if user_home is not None else Path.home()
        self.confirm_overwrite = confirm_overwrite or _decline_overwrite
        self.console = console or Console(stderr=True)

    # ------------------------------------------------------------------
    # init
    # ------------------------------------------------------------------

    def init_pool(self) -> InitOutcome:
        """Create the local pool layout; a no-op when already initialized."""
        root = local_pool_root(self.home)
        marker = init_marker(self.home)
        if marker.exists():
            return InitOutcome(path=root, created=False)

        for kind in ArtifactKind:
            directory = local_artifact_dir(self.home, kind)
            directory.mkdir(parents=True, exist_ok=True)
            (directory / ".gitkeep").touch()
        marker.touch()
        logger.info("Initialized local pool at %s", root)
        return InitOutcome(path=root, created=True)

    # ------------------------------------------------------------------
    # add
    # ------------------------------------------------------------------

    def add(
        self,
        source: str | None = None,
        *,
        claude_project: str | None = None,
        claude_personal: str | None = None,
        command: str | None = None,
        shared: str | None = None,
        as_name: str | None = None,
    ) -> CopyOutcome | RepoOutcome:
        """Route an ``add`` request; exactly one route is taken.

        Priority: URL source, ``command``, ``shared``, ``claude_personal``,
        ``claude_project``, then a bare source treated as a project agent.
        """
        if source and is_url(source):
            return self.add_from_url(source, as_name)
        if command:
            return self.add_from_claude(command, ArtifactKind.COMMAND)
        if shared:
            return self.add_from_claude(shared, ArtifactKind.SHARED)
        if claude_personal:
            return self.add_from_claude(claude_personal, ArtifactKind.AGENT, personal=True)
        if claude_project:
            return self.add_from_claude(claude_project, ArtifactKind.AGENT)
        if source:
            return self.add_from_claude(source, ArtifactKind.AGENT)
        raise BuddyError("Please specify a source: URL, filename, or use --claude-project|-j <name>")

    def add_from_url(self, url: str, as_name: str | None = None) -> CopyOutcome | RepoOutcome:
        scheme = validate_url_protocol(url)
        if scheme == "https":
            return self.add_repository(url, as_name)
        return self.add_local_file(url)

    def add_repository(self, url: str, as_name: str | None = None) -> RepoOutcome:
        """Clone *url* into the pools directory, or pull if already cloned.

        Raises:
            RepoCollisionError: If the target directory holds something else.
            GitCommandError: If clone or pull fails.
        """
        name = validate_pool_name(as_name or extract_repo_name(url))
        inspection = inspect_pool_dir(pool_root(self.home, name), url)

        if inspection.state is RepoState.COLLISION:
            raise RepoCollisionError(name, inspection.existing_origin, url)

        if inspection.state is RepoState.MATCHING_CLONE:
            self.console.print(f"Repository {name} already exists, pulling latest changes...")
            git.pull(inspection.path)
            return RepoOutcome(name=name, path=inspection.path, action=RepoAction.UPDATED)

        self.console.print(f"Cloning repository as '{name}'...")
        git.clone(url, inspection.path)
        return RepoOutcome(name=name, path=inspection.path, action=RepoAction.CLONED)

    def add_local_file(self, url: str) -> CopyOutcome:
        """Copy the file named by a ``file://`` URL into the local pool's agents."""
        parsed = urlparse(url)
        source = Path(unquote(parsed.netloc + parsed.path))
        if not source.is_file():
            raise SourceNotFoundError("Local", source)
        destination = local_artifact_dir(self.home, ArtifactKind.AGENT) / source.name
        return self._copy(source, destination, source.name, "pool")

    def add_from_claude(self, name: str, kind: ArtifactKind, *, personal: bool = False) -> CopyOutcome:
        """Copy ``.claude/<kind>/<name>.md`` (project or personal) into the local pool."""
        filename = f"{name}{ARTIFACT_SUFFIX}"
        if personal:
            source = claude_personal_dir(self.user_home, kind) / filename
        else:
            source = claude_project_dir(self.cwd, kind) / filename
        if not source.is_file():
            raise SourceNotFoundError(_SOURCE_LABELS[kind], source)
        destination = local_artifact_dir(self.home, kind) / filename
        origin = f"~/.claude/{kind.value}/" if personal else "Claude project"
        return self._copy(source, destination, filename, "pool", origin=origin)

    # ------------------------------------------------------------------
    # import
    # ------------------------------------------------------------------

    def import_artifact(
        self,
        source: str,
        target: ImportTarget = ImportTarget.CURRENT,
        *,
        force: bool = False,
    ) -> CopyOutcome:
        """Resolve the agent reference *source* and copy it to *target*.

        Raises:
            ReadmeImportError: If the leaf name is README and *force* is False.
            InvalidReferenceError: If *source* cannot be parsed.
            ArtifactNotFoundError: If no extension candidate exists.
        """
        reference = parse_reference(source)
        if not force and reference.leaf_name.lower() == "readme":
            raise ReadmeImportError()

        resolved = resolve_artifact(self.home, reference, ArtifactKind.AGENT)
        filename = f"{reference.leaf_name}{ARTIFACT_SUFFIX}"
        destination, location = self._import_destination(target)
        return self._copy(resolved, destination / filename, filename, location)

    def _import_destination(self, target: ImportTarget) -> tuple[Path, str]:
        if target is ImportTarget.PERSONAL:
            return claude_personal_dir(self.user_home, ArtifactKind.AGENT), "~/.claude/agents/"
        if target is ImportTarget.PROJECT:
            return claude_project_dir(self.cwd, ArtifactKind.AGENT), ".claude/agents/"
        return self.cwd, "current directory"

    # ------------------------------------------------------------------
    # tool
    # ------------------------------------------------------------------

    def read_shared(self, source: str) -> str:
        """Return the text of the shared-context artifact *source*."""
        reference = parse_reference(source)
        path = resolve_artifact(self.home, reference, ArtifactKind.SHARED)
        return path.read_text(encoding="utf-8")

    # ------------------------------------------------------------------
    # list
    # ------------------------------------------------------------------

    def list_artifacts(self, pool: str = LOCAL_POOL, kind: ArtifactKind = ArtifactKind.AGENT) -> ListOutcome:
        """Enumerate ``.md``/``.txt`` artifacts of *kind* in *pool*, sorted.

        Raises:
            PoolNotFoundError: If a non-local pool has no directory.
        """
        root, config = resolve_pool(self.home, pool)
        if pool != LOCAL_POOL and not root.is_dir():
            raise PoolNotFoundError(pool)

        directory = root / config.directory_for(kind)
        if not directory.is_dir():
            return ListOutcome(pool=pool, kind=kind)

        items: set[str] = set()
        for path in directory.rglob("*"):
            relative = path.relative_to(directory)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if path.suffix in LISTED_SUFFIXES and path.is_file():
                items.add(relative.with_suffix("").as_posix())
        return ListOutcome(pool=pool, kind=kind, items=sorted(items))

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _copy(
        self,
        source: Path,
        destination: Path,
        filename: str,
        location: str,
        origin: str | None = None,
    ) -> CopyOutcome:
        if destination.exists() and not self.confirm_overwrite(filename, location):
            logger.info("Overwrite of %s declined", destination)
            return CopyOutcome(CopyStatus.CANCELLED, filename, source, destination, location, origin)

        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
        logger.debug("Copied %s -> %s", source, destination)
        return CopyOutcome(CopyStatus.COPIED, filename, source, destination, location, origin)


__all__ = [
    "CopyOutcome",
    "CopyStatus",
    "ImportTarget",
    "InitOutcome",
    "ListOutcome",
    "PoolOperations",
    "RepoAction",
    "RepoOutcome",
]
