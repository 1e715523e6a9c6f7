"""``buddy add`` -- bring agents, commands, shared context or repositories into a pool."""

from __future__ import annotations

import typer

from buddy_cli.cli.ui import confirm_overwrite, console, get_home, print_error, print_success
from buddy_cli.errors import BuddyError, RepoCollisionError
from buddy_cli.pools.operations import CopyOutcome, PoolOperations, RepoOutcome


def add(
    ctx: typer.Context,
    source: str | None = typer.Argument(None, help="URL, filename, or agent name"),
    claude_project: str | None = typer.Option(
        None, "--claude-project", "-j", help="Copy agent from .claude/agents/"
    ),
    claude_personal: str | None = typer.Option(
        None, "--claude-personal", "-g", help="Copy agent from ~/.claude/agents/"
    ),
    command: str | None = typer.Option(None, "--command", "-c", help="Copy command from .claude/commands/"),
    shared: str | None = typer.Option(None, "--shared", "-s", help="Copy shared context from .claude/shared/"),
    as_name: str | None = typer.Option(None, "--as", help="Custom name for repository (avoid collisions)"),
) -> None:
    """Add agents, commands, shared context, or a repository pool."""
    operations = PoolOperations(get_home(ctx), confirm_overwrite=confirm_overwrite, console=console)
    try:
        outcome = operations.add(
            source,
            claude_project=claude_project,
            claude_personal=claude_personal,
            command=command,
            shared=shared,
            as_name=as_name,
        )
    except RepoCollisionError as exc:
        hint = "Use --as <different-name> to choose a different name"
        if exc.existing_origin is None:
            hint = "Remove it manually or use --as <name> to choose a different name"
        print_error(str(exc), hint=hint)
        raise typer.Exit(1) from exc
    except BuddyError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from exc
    except OSError as exc:
        print_error(f"Failed to add: {exc}")
        raise typer.Exit(1) from exc

    _report(outcome)


def _report(outcome: CopyOutcome | RepoOutcome) -> None:
    if isinstance(outcome, RepoOutcome):
        print_success(f"Repository {outcome.name} added to pool")
    elif not outcome.copied:
        print_success("Operation cancelled")
    elif outcome.origin:
        print_success(f"Copied {outcome.filename} from {outcome.origin} to pool")
    else:
        print_success(f"Copied {outcome.filename} to pool")
