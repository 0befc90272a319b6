"""Tests for ``agentskillscanner scan`` command.

Verifies:
    - Empty machines scan cleanly (exit code 0).
    - Text and JSON output for a populated home and project.
    - ``--tool`` / ``--level`` filtering, including the ``claude`` alias.
    - Invalid option values exit with code 2.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from agentskillscanner import __version__
from agentskillscanner.cli.main import cli
from agentskillscanner.cli.scan import artifact_to_dict, result_to_dict
from agentskillscanner.models import (
    Artifact,
    Plugin,
    ScanResult,
    SkillLevel,
    SkillType,
    Tool,
)


@pytest.fixture
def machine(tmp_path: Path) -> tuple[Path, Path]:
    """A fake home with one Claude user skill and a Codex skill,
    plus a project with one Gemini project skill."""
    home = tmp_path / "home"
    project = tmp_path / "project"

    foo = home / ".claude" / "skills" / "foo"
    foo.mkdir(parents=True)
    (foo / "SKILL.md").write_text(
        "---\nname: Foo Skill\ndescription: does things\n---\n"
    )
    cx = home / ".codex" / "skills" / "cx"
    cx.mkdir(parents=True)
    (cx / "SKILL.md").write_text("---\nname: cx\n---\n")
    gm = project / ".gemini" / "skills" / "gm"
    gm.mkdir(parents=True)
    (gm / "SKILL.md").write_text("---\nname: gm\ndescription: gemini one\n---\n")
    return home, project


def _scan(runner: CliRunner, home: Path, project: Path, *args: str):
    return runner.invoke(
        cli, ["scan", "--home", str(home), "-d", str(project), *args],
    )


class TestScanEmpty:
    """Tests for scanning a machine with nothing installed."""

    def test_exit_code_0(self, runner: CliRunner, tmp_path: Path) -> None:
        result = _scan(runner, tmp_path, tmp_path)
        assert result.exit_code == 0

    def test_no_skills_message(self, runner: CliRunner, tmp_path: Path) -> None:
        result = _scan(runner, tmp_path, tmp_path)
        assert "No skills found" in result.output
        assert "Total: 0" in result.output

    def test_empty_json(self, runner: CliRunner, tmp_path: Path) -> None:
        result = _scan(runner, tmp_path, tmp_path, "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["skills"] == []
        assert data["plugins"] == []
        assert data["summary"]["total"] == 0


class TestScanText:
    """Tests for the default terminal report."""

    def test_lists_skills(self, runner: CliRunner, machine: tuple[Path, Path]) -> None:
        result = _scan(runner, *machine)
        assert result.exit_code == 0
        assert "Foo Skill" in result.output
        assert "gm" in result.output
        assert "User level" in result.output
        assert "Project level" in result.output

    def test_verbose(self, runner: CliRunner, machine: tuple[Path, Path]) -> None:
        plain = _scan(runner, *machine)
        result = _scan(runner, *machine, "--verbose")
        assert result.exit_code == 0
        assert "Path" not in plain.output
        assert "Path" in result.output


class TestScanJson:
    """Tests for ``--json`` output."""

    def test_structure(self, runner: CliRunner, machine: tuple[Path, Path]) -> None:
        home, project = machine
        result = _scan(runner, home, project, "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["version"] == __version__
        assert [s["name"] for s in data["skills"]] == ["Foo Skill", "cx", "gm"]
        foo = data["skills"][0]
        assert foo["tool"] == "claude-code"
        assert foo["level"] == "user"
        assert foo["skill_type"] == "skill"
        assert foo["description"] == "does things"
        assert foo["path"] == str(home / ".claude" / "skills" / "foo" / "SKILL.md")
        assert data["summary"] == {
            "user": 2,
            "project": 1,
            "enterprise": 0,
            "plugin_count": 0,
            "plugin_items": 0,
            "total": 3,
        }

    def test_short_flag(self, runner: CliRunner, machine: tuple[Path, Path]) -> None:
        result = _scan(runner, *machine, "-j")
        assert json.loads(result.output)["summary"]["total"] == 3


class TestScanFilters:
    """Tests for ``--tool`` and ``--level``."""

    def test_tool_alias(self, runner: CliRunner, machine: tuple[Path, Path]) -> None:
        result = _scan(runner, *machine, "--json", "-t", "claude")
        names = [s["name"] for s in json.loads(result.output)["skills"]]
        assert names == ["Foo Skill"]

    def test_tool_list(self, runner: CliRunner, machine: tuple[Path, Path]) -> None:
        result = _scan(runner, *machine, "--json", "--tool", "Gemini, codex")
        names = [s["name"] for s in json.loads(result.output)["skills"]]
        assert names == ["cx", "gm"]

    def test_level(self, runner: CliRunner, machine: tuple[Path, Path]) -> None:
        result = _scan(runner, *machine, "--json", "-l", "project")
        data = json.loads(result.output)
        assert [s["name"] for s in data["skills"]] == ["gm"]

    def test_unknown_tool_exits_2(
        self, runner: CliRunner, machine: tuple[Path, Path],
    ) -> None:
        result = _scan(runner, *machine, "--tool", "cursor")
        assert result.exit_code == 2
        assert "cursor" in result.output

    def test_unknown_level_exits_2(
        self, runner: CliRunner, machine: tuple[Path, Path],
    ) -> None:
        result = _scan(runner, *machine, "--level", "global")
        assert result.exit_code == 2
        assert "global" in result.output

    def test_missing_project_dir_exits_2(
        self, runner: CliRunner, tmp_path: Path,
    ) -> None:
        result = runner.invoke(cli, ["scan", "-d", str(tmp_path / "nope")])
        assert result.exit_code == 2


class TestScanDebug:
    """Tests for ``--debug``."""

    def test_enables_package_logging(
        self, runner: CliRunner, tmp_path: Path,
    ) -> None:
        result = _scan(runner, tmp_path, tmp_path, "--debug")
        assert result.exit_code == 0
        assert logging.getLogger("agentskillscanner").level == logging.DEBUG

    def test_repeated_runs_keep_one_handler(
        self, runner: CliRunner, tmp_path: Path,
    ) -> None:
        package_logger = logging.getLogger("agentskillscanner")
        before = len(package_logger.handlers)
        _scan(runner, tmp_path, tmp_path, "--debug")
        _scan(runner, tmp_path, tmp_path, "--debug")
        assert len(package_logger.handlers) == before + 1


# ---------------------------------------------------------------------------
# Serialization helpers
# ---------------------------------------------------------------------------


class TestResultToDict:
    """Tests for the JSON report builder."""

    def test_plugin_serialization(self, tmp_path: Path) -> None:
        item = Artifact(
            name="run",
            tool=Tool.CLAUDE_CODE,
            artifact_type=SkillType.COMMAND,
            level=SkillLevel.PLUGIN,
            path=tmp_path / "run.md",
            plugin_name="a",
            marketplace="market",
            enabled=False,
            extra={"model": "opus"},
        )
        plugin = Plugin(
            name="a",
            tool=Tool.CLAUDE_CODE,
            install_path=tmp_path,
            marketplace="market",
            version="1.0.0",
            author="Jo",
            items=[item],
        )
        data = result_to_dict(ScanResult(artifacts=[item], plugins=[plugin]))
        (p,) = data["plugins"]
        assert p["install_path"] == str(tmp_path)
        assert p["enabled"] is False
        assert p["author"] == "Jo"
        assert p["items"] == [artifact_to_dict(item)]
        assert data["summary"]["plugin_count"] == 1
        assert data["summary"]["plugin_items"] == 1
        assert data["summary"]["total"] == 1

    def test_artifact_extra_is_copied(self, tmp_path: Path) -> None:
        item = Artifact(
            name="x",
            tool=Tool.CODEX,
            artifact_type=SkillType.SKILL,
            level=SkillLevel.USER,
            path=tmp_path,
            extra={"bundled": "true"},
        )
        out = artifact_to_dict(item)
        out["extra"]["bundled"] = "false"
        assert item.extra == {"bundled": "true"}
