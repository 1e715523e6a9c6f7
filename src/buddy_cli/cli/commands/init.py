"""``buddy init`` -- create the local pool layout."""

from __future__ import annotations

from pathlib import Path

import typer

from buddy_cli.cli.ui import get_home, print_error, print_success
from buddy_cli.pools.operations import PoolOperations


def init(
    ctx: typer.Context,
    pathname: Path | None = typer.Argument(None, help="Custom path (defaults to ~/.buddy)"),
) -> None:
    """Initialize the local pool directory."""
    home = pathname.expanduser() if pathname is not None else get_home(ctx)
    try:
        outcome = PoolOperations(home).init_pool()
    except OSError as exc:
        print_error(f"Failed to initialize pool: {exc}")
        raise typer.Exit(1) from exc

    if outcome.created:
        print_success(f"Initialized pool at: {outcome.path}")
    else:
        print_success(f"Pool directory already exists at: {outcome.path}")
