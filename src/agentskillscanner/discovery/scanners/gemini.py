"""Scanner for the Gemini CLI.

Gemini has no plugin marketplace; its closest equivalent is extensions,
directories carrying a ``gemini-extension.json`` manifest. Each extension
is reported as a ``Plugin`` record at the plugin level. Extensions are
always enabled and have no marketplace.

Locations:
    user:    ``~/.gemini/skills/<name>/SKILL.md``
    project: ``<project>/.gemini/skills/<name>/SKILL.md``
    plugin:  ``~/.gemini/extensions/<ext>/gemini-extension.json``, then
             ``<project>/.gemini/extensions/<ext>/gemini-extension.json``
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from agentskillscanner.discovery.base import ToolScanner, resolve_levels
from agentskillscanner.discovery.fs import is_dir, read_json, sorted_dir
from agentskillscanner.discovery.skill_dirs import scan_skill_dir
from agentskillscanner.models import Plugin, ScanResult, SkillLevel, Tool

logger = logging.getLogger(__name__)

EXTENSION_MANIFEST = "gemini-extension.json"


class GeminiScanner(ToolScanner):
    """Gemini CLI: user and project skills, plus installed extensions."""

    tool = Tool.GEMINI

    def scan(self, levels: Iterable[SkillLevel] | None = None) -> ScanResult:
        targets = resolve_levels(levels)
        result = ScanResult()

        if SkillLevel.USER in targets:
            result.artifacts.extend(
                scan_skill_dir(
                    self.env.home / ".gemini" / "skills", self.tool, SkillLevel.USER,
                )
            )
        if SkillLevel.PROJECT in targets:
            result.artifacts.extend(
                scan_skill_dir(
                    self.env.project_dir / ".gemini" / "skills",
                    self.tool, SkillLevel.PROJECT,
                )
            )
        if SkillLevel.PLUGIN in targets:
            for plugin in self._scan_extensions():
                result.plugins.append(plugin)
                result.artifacts.extend(plugin.items)
        return result

    def _scan_extensions(self) -> list[Plugin]:
        plugins: list[Plugin] = []
        for ext_root in (
            self.env.home / ".gemini" / "extensions",
            self.env.project_dir / ".gemini" / "extensions",
        ):
            if not is_dir(ext_root):
                continue
            for child in sorted_dir(ext_root):
                plugin = self._read_extension(ext_root / child)
                if plugin is not None:
                    plugins.append(plugin)
        return plugins

    def _read_extension(self, ext_dir: Path) -> Plugin | None:
        """Build a plugin record from an extension manifest, if valid."""
        manifest = read_json(ext_dir / EXTENSION_MANIFEST)
        if not isinstance(manifest, dict):
            if is_dir(ext_dir):
                logger.debug("No usable %s in %s", EXTENSION_MANIFEST, ext_dir)
            return None

        name = manifest.get("name")
        version = manifest.get("version")
        description = manifest.get("description")
        return Plugin(
            name=name if isinstance(name, str) else ext_dir.name,
            tool=self.tool,
            install_path=ext_dir,
            version=version if isinstance(version, str) else "",
            enabled=True,
            description=description if isinstance(description, str) else "",
        )
