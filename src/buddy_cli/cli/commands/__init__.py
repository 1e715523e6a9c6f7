"""CLI command modules for buddy.

Each module holds one command function; ``register_commands`` attaches
them to the root Typer app.
"""

from __future__ import annotations

import typer

from buddy_cli.cli.commands.add import add
from buddy_cli.cli.commands.config_cmd import config
from buddy_cli.cli.commands.import_cmd import import_agent
from buddy_cli.cli.commands.init import init
from buddy_cli.cli.commands.list_cmd import list_artifacts
from buddy_cli.cli.commands.tool import tool


def register_commands(app: typer.Typer) -> None:
    """Attach every buddy command to *app*."""
    app.command("init")(init)
    app.command("add")(add)
    app.command("import")(import_agent)
    app.command("tool")(tool)
    app.command("list")(list_artifacts)
    app.command("config")(config)


__all__ = ["register_commands"]
