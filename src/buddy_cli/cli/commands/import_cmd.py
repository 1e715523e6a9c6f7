"""``buddy import`` -- copy a pooled agent into a project or personal directory."""

from __future__ import annotations

import typer

from buddy_cli.cli.ui import confirm_overwrite, get_home, print_error, print_success
from buddy_cli.errors import BuddyError, ReadmeImportError
from buddy_cli.pools.operations import ImportTarget, PoolOperations


def import_agent(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Source in format <pool>/<agent path>, e.g. local/reviewer"),
    claude_project: bool = typer.Option(False, "--claude-project", "-j", help="Import to .claude/agents/"),
    claude_personal: bool = typer.Option(False, "--claude-personal", "-g", help="Import to ~/.claude/agents/"),
    force: bool = typer.Option(False, "--force", help="Skip README check"),
) -> None:
    """Import an agent from a pool."""
    if claude_personal:
        target = ImportTarget.PERSONAL
    elif claude_project:
        target = ImportTarget.PROJECT
    else:
        target = ImportTarget.CURRENT

    operations = PoolOperations(get_home(ctx), confirm_overwrite=confirm_overwrite)
    try:
        outcome = operations.import_artifact(source, target, force=force)
    except ReadmeImportError as exc:
        print_error(str(exc), hint=exc.hint)
        raise typer.Exit(1) from exc
    except BuddyError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from exc
    except OSError as exc:
        print_error(f"Failed to copy file: {exc}")
        raise typer.Exit(1) from exc

    if outcome.copied:
        print_success(f"Imported {outcome.filename} to {outcome.location}")
    else:
        print_success("Operation cancelled")
