"""``buddy config`` -- show where configuration comes from for a pool."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from buddy_cli.cli.ui import console, get_home, print_error
from buddy_cli.errors import BuddyError
from buddy_cli.pools.config import config_path, find_buddy_config, resolve_pool
from buddy_cli.runtime.paths import LOCAL_POOL, ArtifactKind


def config(
    ctx: typer.Context,
    pool: str = typer.Argument(LOCAL_POOL, help="Pool whose effective configuration to show"),
) -> None:
    """Display the buddy home, discovered config file, and a pool's effective layout."""
    home = get_home(ctx)
    discovered = find_buddy_config(Path.cwd())

    console.print(f"[bold]Buddy home:[/bold] {escape(str(home))}")
    console.print(
        f"[bold]Nearest .buddy/config.json:[/bold] {escape(str(discovered)) if discovered else '[dim]none[/dim]'}"
    )

    try:
        root, pool_config = resolve_pool(home, pool)
    except BuddyError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from exc
    except OSError as exc:
        print_error(f"Failed to read configuration for {pool}: {exc}")
        raise typer.Exit(1) from exc

    source = config_path(root)
    if pool == LOCAL_POOL:
        origin = "fixed layout"
    elif source.is_file():
        origin = str(source)
    else:
        origin = "defaults"

    table = Table(title=escape(f"Pool '{pool}' ({origin})"), show_lines=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="bold")
    table.add_column("Resolved Path")

    for kind in ArtifactKind:
        directory = pool_config.directory_for(kind)
        table.add_row(kind.label, escape(directory) or "[dim](pool root)[/dim]", escape(str(root / directory)))
    table.add_row("extension", pool_config.extension or "[dim].md, .txt, none[/dim]", "")

    console.print(table)
