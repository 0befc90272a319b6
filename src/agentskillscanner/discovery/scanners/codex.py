"""Scanner for the OpenAI Codex CLI.

Codex versions project skills with the repository rather than the working
directory: project-level skills live under ``.agents/skills`` at the root
of the enclosing git checkout, found by walking up from the scan root.

Locations:
    user:       ``~/.codex/skills/<name>/SKILL.md``, then the skills Codex
                ships itself under ``~/.codex/skills/.system/<name>``
    project:    ``<repo root>/.agents/skills/<name>/SKILL.md``
    enterprise: ``/etc/codex/skills/<name>/SKILL.md``
"""

from __future__ import annotations

from collections.abc import Iterable

from agentskillscanner.discovery.base import ToolScanner, resolve_levels
from agentskillscanner.discovery.skill_dirs import find_repo_root, scan_skill_dir
from agentskillscanner.models import Artifact, ScanResult, SkillLevel, Tool

# Directory holding the skills bundled with Codex itself.
SYSTEM_DIRNAME = ".system"


class CodexScanner(ToolScanner):
    """OpenAI Codex CLI: user, repository and enterprise skills."""

    tool = Tool.CODEX

    def scan(self, levels: Iterable[SkillLevel] | None = None) -> ScanResult:
        targets = resolve_levels(levels)
        result = ScanResult()

        if SkillLevel.USER in targets:
            result.artifacts.extend(self._scan_user())
        if SkillLevel.PROJECT in targets:
            result.artifacts.extend(self._scan_project())
        if SkillLevel.ENTERPRISE in targets:
            root = self.env.enterprise_dir(self.tool)
            if root is not None:
                result.artifacts.extend(
                    scan_skill_dir(root, self.tool, SkillLevel.ENTERPRISE)
                )
        return result

    def _scan_user(self) -> list[Artifact]:
        skills_dir = self.env.home / ".codex" / "skills"
        items = scan_skill_dir(
            skills_dir, self.tool, SkillLevel.USER, skip=frozenset({SYSTEM_DIRNAME}),
        )
        for bundled in scan_skill_dir(
            skills_dir / SYSTEM_DIRNAME, self.tool, SkillLevel.USER,
        ):
            bundled.extra["bundled"] = "true"
            items.append(bundled)
        return items

    def _scan_project(self) -> list[Artifact]:
        repo_root = find_repo_root(self.env.project_dir)
        if repo_root is None:
            return []
        return scan_skill_dir(
            repo_root / ".agents" / "skills", self.tool, SkillLevel.PROJECT,
        )
