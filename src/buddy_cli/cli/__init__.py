"""CLI helpers exposed for other modules."""

from .ui import CliState, confirm_overwrite, get_home, print_error, print_success

__all__ = ["CliState", "confirm_overwrite", "get_home", "print_error", "print_success"]
