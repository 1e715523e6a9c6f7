"""``buddy tool`` -- emit shared context as a single JSON record.

Success writes exactly ``{"content": ...}`` to stdout; failure writes
``{"error": ...}`` to stderr and exits 1. Nothing else is printed.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from buddy_cli.cli.ui import get_home
from buddy_cli.errors import BuddyError
from buddy_cli.pools.operations import PoolOperations


def tool(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Source in format local/<name> or <pool>/<name>"),
) -> None:
    """Output shared context as JSON for tool consumption."""
    operations = PoolOperations(get_home(ctx))
    try:
        content = operations.read_shared(source)
    except BuddyError as exc:
        _fail(str(exc))
    except (OSError, UnicodeDecodeError) as exc:
        _fail(f"Failed to read context file: {exc}")

    typer.echo(json.dumps({"content": content}))


def _fail(message: str) -> NoReturn:
    typer.echo(json.dumps({"error": message}), err=True)
    raise typer.Exit(1)
