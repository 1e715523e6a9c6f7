from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def buddy_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point BUDDY_HOME at an isolated directory for the duration of a test."""
    home = tmp_path / "buddy"
    monkeypatch.setenv("BUDDY_HOME", str(home))
    return home


@pytest.fixture()
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A working directory standing in for the user's current project."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture()
def user_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An isolated user home so ~/.claude never touches the real one."""
    home = tmp_path / "user"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home

