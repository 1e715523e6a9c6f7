"""Global buddy home directory discovery.

Provides the canonical function for locating the user-global ``~/.buddy/``
directory (cross-platform). The result is computed once per CLI invocation
and passed explicitly to every component that needs it.
"""

from __future__ import annotations

import os
from pathlib import Path

BUDDY_HOME_ENV = "BUDDY_HOME"


def _is_windows() -> bool:
    """Return True when running on Windows."""
    return os.name == "nt"


def get_buddy_home() -> Path:
    """Return the path to the user-global buddy root directory.

    Resolution order:
    1. BUDDY_HOME environment variable (all platforms)
    2. ~/.buddy/ on macOS/Linux (Path.home() / ".buddy")
    3. %LOCALAPPDATA%\\buddy\\ on Windows (via platformdirs)

    Returns:
        Path: Absolute path to the buddy root directory.

    Raises:
        RuntimeError: If the home directory cannot be determined.
    """
    if env_home := os.environ.get(BUDDY_HOME_ENV):
        return Path(env_home).expanduser()

    if _is_windows():
        from platformdirs import user_data_dir

        return Path(user_data_dir("buddy"))

    return Path.home() / ".buddy"
