"""
Buddy CLI - manage pools of agents, commands, and shared context.

Usage:
    buddy init
    buddy add https://github.com/org/agents.git
    buddy import agents/reviewer --claude-project
    buddy list agents --commands
    buddy tool local/style-guide
"""

from __future__ import annotations

import typer

from buddy_cli.cli.commands import register_commands
from buddy_cli.cli.ui import CliState, configure_logging, console
from buddy_cli.runtime.home import get_buddy_home

__version__ = "0.1.0"

app = typer.Typer(
    name="buddy",
    help="Manage git-hosted subagents, commands, and shared context",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"buddy {__version__}", markup=False)
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log diagnostics to stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Resolve the buddy home once and share it with every command."""
    configure_logging(verbose)
    ctx.obj = CliState(home=get_buddy_home(), verbose=verbose)


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
