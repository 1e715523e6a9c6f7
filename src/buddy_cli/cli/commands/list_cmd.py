"""``buddy list`` -- enumerate the artifacts of a pool."""

from __future__ import annotations

import typer

from buddy_cli.cli.ui import console, get_home, print_error
from buddy_cli.errors import BuddyError
from buddy_cli.pools.operations import PoolOperations
from buddy_cli.runtime.paths import LOCAL_POOL, ArtifactKind


def list_artifacts(
    ctx: typer.Context,
    namespace: str = typer.Argument(LOCAL_POOL, help='Pool name (defaults to "local")'),
    commands: bool = typer.Option(False, "--commands", "-c", help="List commands instead of agents"),
    shared: bool = typer.Option(False, "--shared", "-s", help="List shared context instead of agents"),
) -> None:
    """List agents, commands, or shared context in a pool."""
    if commands:
        kind = ArtifactKind.COMMAND
    elif shared:
        kind = ArtifactKind.SHARED
    else:
        kind = ArtifactKind.AGENT

    try:
        outcome = PoolOperations(get_home(ctx)).list_artifacts(namespace, kind)
    except BuddyError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from exc
    except OSError as exc:
        print_error(f"Failed to list {namespace}: {exc}")
        raise typer.Exit(1) from exc

    if not outcome.items:
        console.print(f"No {kind.label} found in {namespace}", markup=False)
        return

    console.print(f"{kind.label} in {namespace}:", markup=False)
    for item in outcome.items:
        console.print(f"  {item}", markup=False)
