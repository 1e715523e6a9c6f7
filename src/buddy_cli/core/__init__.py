"""Core helpers shared by buddy commands."""

from buddy_cli.core.git import clone, get_origin_url, has_git_marker, pull, run_git

__all__ = ["clone", "get_origin_url", "has_git_marker", "pull", "run_git"]
