"""End-to-end tests for the buddy command surface."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from buddy_cli import __version__, app
from buddy_cli.errors import GitCommandError
from tests.utils import make_clone, requires_git, write_file

runner = CliRunner()

URL = "https://github.com/org/agents.git"


@pytest.fixture(autouse=True)
def _isolated(buddy_home: Path, project_dir: Path, user_home: Path) -> None:
    """Every CLI test runs with its own buddy home, project and user home."""


def test_help_lists_commands() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for name in ["init", "add", "import", "tool", "list", "config"]:
        assert name in result.output


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


class TestInit:
    def test_default_home(self, buddy_home: Path) -> None:
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert "✓ Initialized pool at:" in result.output
        assert (buddy_home / "pools" / "local" / ".buddy-initialized").is_file()

    def test_custom_path(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["init", str(tmp_path / "custom")])
        assert result.exit_code == 0
        assert (tmp_path / "custom" / "pools" / "local" / "shared" / ".gitkeep").is_file()

    def test_second_run_reports_existing(self) -> None:
        runner.invoke(app, ["init"])
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert "already exists" in result.output


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------


class TestAdd:
    def test_project_agent(self, buddy_home: Path, project_dir: Path) -> None:
        write_file(project_dir / ".claude" / "agents" / "reviewer.md", "review")
        result = runner.invoke(app, ["add", "reviewer"])
        assert result.exit_code == 0, result.output
        assert "✓ Copied reviewer.md from Claude project to pool" in result.output
        assert (buddy_home / "pools" / "local" / "agents" / "reviewer.md").read_text() == "review"

    def test_personal_agent(self, buddy_home: Path, user_home: Path) -> None:
        write_file(user_home / ".claude" / "agents" / "helper.md", "help")
        result = runner.invoke(app, ["add", "-g", "helper"])
        assert result.exit_code == 0, result.output
        assert "from ~/.claude/agents/ to pool" in result.output

    def test_command_flag(self, buddy_home: Path, project_dir: Path) -> None:
        write_file(project_dir / ".claude" / "commands" / "deploy.md")
        result = runner.invoke(app, ["add", "--command", "deploy"])
        assert result.exit_code == 0, result.output
        assert (buddy_home / "pools" / "local" / "commands" / "deploy.md").is_file()

    def test_missing_source(self) -> None:
        result = runner.invoke(app, ["add", "ghost"])
        assert result.exit_code == 1
        assert "✗ Agent file not found:" in result.output

    def test_no_arguments(self) -> None:
        result = runner.invoke(app, ["add"])
        assert result.exit_code == 1
        assert "Please specify a source" in result.output

    def test_declined_overwrite_exits_zero(self, buddy_home: Path, project_dir: Path) -> None:
        write_file(project_dir / ".claude" / "agents" / "reviewer.md", "new")
        dest = write_file(buddy_home / "pools" / "local" / "agents" / "reviewer.md", "old")
        result = runner.invoke(app, ["add", "reviewer"], input="n\n")
        assert result.exit_code == 0
        assert "Overwrite?" in result.output
        assert "✓ Operation cancelled" in result.output
        assert dest.read_text() == "old"

    @pytest.mark.parametrize(
        ("url", "message"),
        [
            ("http://github.com/org/agents", "TLS required, use HTTPS"),
            ("ssh://git@github.com/org/agents", "Not implemented yet"),
            ("ftp://example.com/agents", "Unsupported protocol"),
        ],
    )
    def test_rejected_protocols(self, url: str, message: str) -> None:
        result = runner.invoke(app, ["add", url])
        assert result.exit_code == 1
        assert f"✗ {message}" in result.output

    def test_repository_clone(self, buddy_home: Path) -> None:
        with patch("buddy_cli.pools.operations.git.clone") as clone:
            result = runner.invoke(app, ["add", URL])
        assert result.exit_code == 0, result.output
        clone.assert_called_once_with(URL, buddy_home / "pools" / "agents")
        assert "Cloning repository as 'agents'..." in result.output
        assert "✓ Repository agents added to pool" in result.output

    @requires_git
    def test_repository_collision(self, buddy_home: Path) -> None:
        make_clone(buddy_home / "pools" / "agents", "https://github.com/other/agents.git")
        with patch("buddy_cli.pools.operations.git.clone") as clone:
            result = runner.invoke(app, ["add", URL])
        assert result.exit_code == 1
        clone.assert_not_called()
        assert "already exists in pool" in result.output
        assert "Existing origin: https://github.com/other/agents.git" in result.output
        assert "--as <different-name>" in result.output

    @requires_git
    def test_repository_update(self, buddy_home: Path) -> None:
        target = make_clone(buddy_home / "pools" / "agents", "https://github.com/org/agents")
        with patch("buddy_cli.pools.operations.git.pull") as pull:
            result = runner.invoke(app, ["add", "https://GitHub.com/org/agents.git"])
        assert result.exit_code == 0, result.output
        pull.assert_called_once_with(target)
        assert "pulling latest changes" in result.output

    def test_git_failure(self) -> None:
        error = GitCommandError(["clone", URL], 128, "fatal: repository not found")
        with patch("buddy_cli.pools.operations.git.clone", side_effect=error):
            result = runner.invoke(app, ["add", URL])
        assert result.exit_code == 1
        assert "fatal: repository not found" in result.output


# ---------------------------------------------------------------------------
# import
# ---------------------------------------------------------------------------


class TestImport:
    def test_import_to_project(self, buddy_home: Path, project_dir: Path) -> None:
        write_file(buddy_home / "pools" / "local" / "agents" / "reviewer.md", "r")
        result = runner.invoke(app, ["import", "local/reviewer", "-j"])
        assert result.exit_code == 0, result.output
        assert "✓ Imported reviewer.md to .claude/agents/" in result.output
        assert (project_dir / ".claude" / "agents" / "reviewer.md").read_text() == "r"

    def test_personal_wins_over_project(self, buddy_home: Path, user_home: Path, project_dir: Path) -> None:
        write_file(buddy_home / "pools" / "team" / "helper.md", "h")
        result = runner.invoke(app, ["import", "team/helper", "-j", "-g"])
        assert result.exit_code == 0, result.output
        assert (user_home / ".claude" / "agents" / "helper.md").is_file()
        assert not (project_dir / ".claude").exists()

    def test_not_found_lists_all_candidates(self, buddy_home: Path) -> None:
        result = runner.invoke(app, ["import", "team/ghost"])
        assert result.exit_code == 1
        pool = buddy_home / "pools" / "team"
        for candidate in ("ghost.md", "ghost.txt"):
            assert str(pool / candidate) in result.output
        assert "Agent file not found. Tried:" in result.output

    def test_readme_refused(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["import", "team/ReadMe"])
        assert result.exit_code == 1
        assert "use --force" in result.output
        assert list(project_dir.iterdir()) == []

    def test_readme_forced(self, buddy_home: Path, project_dir: Path) -> None:
        write_file(buddy_home / "pools" / "team" / "README.md", "# team")
        result = runner.invoke(app, ["import", "team/README", "--force"])
        assert result.exit_code == 0, result.output
        assert (project_dir / "README.md").read_text() == "# team"

    def test_trailing_slash_is_invalid(self) -> None:
        result = runner.invoke(app, ["import", "team/"])
        assert result.exit_code == 1
        assert "Invalid reference" in result.output


# ---------------------------------------------------------------------------
# tool
# ---------------------------------------------------------------------------


class TestTool:
    def test_success_is_single_json_record(self, buddy_home: Path) -> None:
        write_file(buddy_home / "pools" / "local" / "shared" / "style.md", "line 1\n\"quoted\"\n")
        result = runner.invoke(app, ["tool", "local/style"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"content": "line 1\n\"quoted\"\n"}

    def test_pool_uses_context_dir(self, buddy_home: Path) -> None:
        pool = buddy_home / "pools" / "team"
        write_file(pool / ".buddy" / "config.json", json.dumps({"context": "ctx", "extension": "ctx"}))
        write_file(pool / "ctx" / "rules.ctx", "rules")
        result = runner.invoke(app, ["tool", "team/rules"])
        assert json.loads(result.stdout) == {"content": "rules"}

    def test_not_found_is_json_error(self) -> None:
        result = runner.invoke(app, ["tool", "local/missing"])
        assert result.exit_code == 1
        payload = json.loads(result.output.strip().splitlines()[-1])
        assert payload["error"].startswith("Context file not found. Tried:")
        assert "✗" not in result.output

    def test_absolute_path_cannot_escape_pool(self, tmp_path: Path) -> None:
        secret = write_file(tmp_path / "outside" / "secret.md", "TOP SECRET")
        result = runner.invoke(app, ["tool", f"local/{secret.with_suffix('')}"])
        assert result.exit_code == 1
        assert "TOP SECRET" not in result.output
        payload = json.loads(result.output.strip().splitlines()[-1])
        assert "absolute paths are not allowed" in payload["error"]


# ---------------------------------------------------------------------------
# list / config
# ---------------------------------------------------------------------------


class TestList:
    def test_lists_local_agents(self, buddy_home: Path) -> None:
        agents = buddy_home / "pools" / "local" / "agents"
        write_file(agents / "b.md")
        write_file(agents / "a.txt")
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["agents in local:", "  a", "  b"]

    def test_empty_pool_exits_zero(self) -> None:
        result = runner.invoke(app, ["list", "--shared"])
        assert result.exit_code == 0
        assert "No shared context found in local" in result.output

    def test_unknown_pool_exits_one(self) -> None:
        result = runner.invoke(app, ["list", "ghost", "-c"])
        assert result.exit_code == 1
        assert "✗ Pool 'ghost' not found" in result.output

    def test_pool_outside_pools_root_is_rejected(self, buddy_home: Path) -> None:
        runner.invoke(app, ["init"])
        write_file(buddy_home.parent / "elsewhere" / "private-notes.md")
        result = runner.invoke(app, ["list", "../../elsewhere"])
        assert result.exit_code == 1
        assert "✗ Invalid pool name '../../elsewhere'" in result.output
        assert "private-notes" not in result.output


class TestConfig:
    def test_shows_pool_layout(self, buddy_home: Path) -> None:
        pool = buddy_home / "pools" / "team"
        write_file(pool / ".buddy" / "config.json", json.dumps({"agents": "agents", "extension": "prompt"}))
        result = runner.invoke(app, ["config", "team"])
        assert result.exit_code == 0, result.output
        assert str(buddy_home) in result.output
        assert "prompt" in result.output

    def test_local_is_fixed(self) -> None:
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "fixed layout" in result.output

    def test_pool_outside_pools_root_is_rejected(self) -> None:
        result = runner.invoke(app, ["config", ".."])
        assert result.exit_code == 1
        assert "✗ Invalid pool name '..'" in result.output
