"""Console helpers shared by buddy commands."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from buddy_cli.runtime.home import get_buddy_home

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


@dataclass(frozen=True)
class CliState:
    """Process-wide values computed once in the app callback."""

    home: Path
    verbose: bool = False


def configure_logging(verbose: bool) -> None:
    """Send debug logging to stderr so stdout stays machine-readable."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
            force=True,
        )


def get_home(ctx: typer.Context | None) -> Path:
    """Return the buddy home computed by the app callback."""
    state = ctx.find_object(CliState) if ctx is not None else None
    if state is not None:
        return state.home
    return get_buddy_home()


def print_success(message: str) -> None:
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str, hint: str | None = None) -> None:
    err_console.print(f"[red]✗[/red] {escape(message)}")
    if hint:
        console.print(f"   {escape(hint)}")


def confirm_overwrite(filename: str, location: str) -> bool:
    """Ask before replacing an existing file; default is No."""
    return typer.confirm(f"File {filename} already exists in {location}. Overwrite?", default=False)


__all__ = [
    "CliState",
    "configure_logging",
    "confirm_overwrite",
    "console",
    "err_console",
    "get_home",
    "print_error",
    "print_success",
]
