"""Tests for CodexScanner: bundled skills and repository-scoped projects."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from agentskillscanner.discovery.environment import ScanEnvironment
from agentskillscanner.discovery.scanners.codex import CodexScanner
from agentskillscanner.models import SkillLevel, Tool


class TestUserLevel:
    def test_user_then_bundled(
        self, env: ScanEnvironment, home: Path, make_skill: Callable[..., Path],
    ) -> None:
        skills = home / ".codex" / "skills"
        make_skill(skills, "mine", name="Mine", description="custom")
        make_skill(skills / ".system", "builtin", name="Builtin")

        artifacts = CodexScanner(env).scan([SkillLevel.USER]).artifacts
        assert [a.name for a in artifacts] == ["Mine", "Builtin"]
        assert artifacts[0].extra == {}
        assert artifacts[1].extra == {"bundled": "true"}
        assert {a.tool for a in artifacts} == {Tool.CODEX}

    def test_system_dir_not_reported_as_skill(
        self, env: ScanEnvironment, home: Path, make_skill: Callable[..., Path],
    ) -> None:
        skills = home / ".codex" / "skills"
        (skills / ".system").mkdir(parents=True)
        (skills / ".system" / "SKILL.md").write_text("---\nname: nope\n---\n")
        assert CodexScanner(env).scan([SkillLevel.USER]).artifacts == []

    def test_bundled_keeps_other_extra_keys(
        self, env: ScanEnvironment, home: Path, make_skill: Callable[..., Path],
    ) -> None:
        make_skill(home / ".codex" / "skills" / ".system", "b", version="2")
        (artifact,) = CodexScanner(env).scan([SkillLevel.USER]).artifacts
        assert artifact.extra == {"version": "2", "bundled": "true"}


class TestProjectLevel:
    def test_repo_root_found_by_walking_up(
        self, tmp_path: Path, home: Path, make_skill: Callable[..., Path],
    ) -> None:
        repo = tmp_path / "repo"
        (repo / ".git").mkdir(parents=True)
        make_skill(repo / ".agents" / "skills", "shared", name="Shared")
        nested = repo / "packages" / "core"
        nested.mkdir(parents=True)
        env = ScanEnvironment(project_dir=nested, home=home, platform="linux")

        (artifact,) = CodexScanner(env).scan([SkillLevel.PROJECT]).artifacts
        assert artifact.name == "Shared"
        assert artifact.level is SkillLevel.PROJECT
        assert artifact.path == repo / ".agents" / "skills" / "shared" / "SKILL.md"

    def test_agents_dir_below_project_ignored_without_repo(
        self, env: ScanEnvironment, project: Path, make_skill: Callable[..., Path],
    ) -> None:
        make_skill(project / ".agents" / "skills", "orphan")
        assert CodexScanner(env).scan([SkillLevel.PROJECT]).artifacts == []


class TestEnterpriseLevel:
    def test_enterprise_skills(
        self, env: ScanEnvironment, enterprise: dict[Tool, Path],
        make_skill: Callable[..., Path],
    ) -> None:
        make_skill(enterprise[Tool.CODEX], "managed", name="Managed")
        (artifact,) = CodexScanner(env).scan([SkillLevel.ENTERPRISE]).artifacts
        assert artifact.name == "Managed"
        assert artifact.level is SkillLevel.ENTERPRISE

    def test_no_enterprise_on_windows(self, home: Path, project: Path) -> None:
        env = ScanEnvironment(project_dir=project, home=home, platform="win32")
        assert CodexScanner(env).scan([SkillLevel.ENTERPRISE]).artifacts == []


class TestUnsupportedLevel:
    def test_plugin_level_is_empty(self, env: ScanEnvironment) -> None:
        result = CodexScanner(env).scan([SkillLevel.PLUGIN])
        assert result.artifacts == []
        assert result.plugins == []
