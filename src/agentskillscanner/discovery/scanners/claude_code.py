"""Scanner for Claude Code.

Locations:
    user:       ``~/.claude/skills/<name>/SKILL.md``
    project:    ``<project>/.claude/skills/<name>/SKILL.md``
    plugin:     ``~/.claude/plugins/installed_plugins.json`` (see
                ``agentskillscanner.discovery.plugins``)
    enterprise: ``<managed root>/skills/<name>/SKILL.md`` and
                ``<managed root>/<name>/SKILL.md``
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from agentskillscanner.discovery.base import ToolScanner, resolve_levels
from agentskillscanner.discovery.fs import is_dir
from agentskillscanner.discovery.plugins import PluginScanner
from agentskillscanner.discovery.skill_dirs import scan_skill_dir
from agentskillscanner.models import Artifact, ScanResult, SkillLevel, Tool


class ClaudeCodeScanner(ToolScanner):
    """Claude Code: skills at every level, plus marketplace plugins."""

    tool = Tool.CLAUDE_CODE

    @property
    def claude_dir(self) -> Path:
        return self.env.home / ".claude"

    def scan(self, levels: Iterable[SkillLevel] | None = None) -> ScanResult:
        targets = resolve_levels(levels)
        result = ScanResult()

        if SkillLevel.USER in targets:
            result.artifacts.extend(
                scan_skill_dir(self.claude_dir / "skills", self.tool, SkillLevel.USER)
            )
        if SkillLevel.PROJECT in targets:
            result.artifacts.extend(
                scan_skill_dir(
                    self.env.project_dir / ".claude" / "skills",
                    self.tool, SkillLevel.PROJECT,
                )
            )
        if SkillLevel.PLUGIN in targets:
            plugins = PluginScanner(self.claude_dir, self.tool).scan()
            result.plugins.extend(plugins)
            for plugin in plugins:
                result.artifacts.extend(plugin.items)
        if SkillLevel.ENTERPRISE in targets:
            result.artifacts.extend(self._scan_enterprise())
        return result

    def _scan_enterprise(self) -> list[Artifact]:
        """Managed skills: the ``skills`` subdirectory first, then loose ones."""
        root = self.env.enterprise_dir(self.tool)
        if root is None or not is_dir(root):
            return []
        items = scan_skill_dir(root / "skills", self.tool, SkillLevel.ENTERPRISE)
        items.extend(scan_skill_dir(root, self.tool, SkillLevel.ENTERPRISE))
        return items
