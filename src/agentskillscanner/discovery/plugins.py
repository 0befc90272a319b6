"""Claude Code plugin discovery.

Installed plugins are listed in ``~/.claude/plugins/installed_plugins.json``
keyed by ``name@marketplace``. The file has two historical shapes:

.. code-block:: json

    {"a@market": [{"installPath": "/p/a", "version": "1.0"}]}

    {"version": 2, "plugins": {"a@market": [{"installPath": "/p/a"}]}}

A missing ``version`` means the first (flat) shape. Only the first record
of each array is authoritative. Whether a plugin is enabled comes from a
separate file, ``~/.claude/settings.json``, under ``enabledPlugins``; a key
absent there means disabled.

Each install directory may contribute four kinds of artifact, collected in
this order:

- ``commands/*.md`` -- slash commands
- ``agents/*.md`` -- subagents
- ``skills/<name>/SKILL.md`` -- skills
- ``hooks/hooks.json`` -- one hook per key of its ``hooks`` mapping

Plugin metadata (description, author) comes from
``.claude-plugin/plugin.json`` inside the install directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from agentskillscanner.discovery.fs import (
    is_dir,
    is_file,
    read_json,
    read_text,
    sorted_dir,
)
from agentskillscanner.discovery.skill_dirs import SKILL_FILENAME
from agentskillscanner.models import Artifact, Plugin, SkillLevel, SkillType, Tool
from agentskillscanner.parsers.frontmatter import parse_frontmatter, split_metadata

logger = logging.getLogger(__name__)

INDEX_RELPATH = Path("plugins") / "installed_plugins.json"
SETTINGS_FILENAME = "settings.json"
DESCRIPTOR_RELPATH = Path(".claude-plugin") / "plugin.json"
HOOKS_RELPATH = Path("hooks") / "hooks.json"


def split_plugin_key(key: str) -> tuple[str, str]:
    """Split ``name@marketplace`` at the last ``@``.

    A key without ``@`` (or whose only ``@`` is the first character) is
    all name and no marketplace.
    """
    name, sep, marketplace = key.rpartition("@")
    if not sep or not name:
        return key, ""
    return name, marketplace


def normalize_author(raw: Any) -> str:
    """Reduce a descriptor ``author`` (string or ``{"name": ...}``) to a string."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, dict):
        name = raw.get("name")
        return name if isinstance(name, str) else ""
    return ""


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def load_install_index(path: Path) -> dict[str, Any]:
    """Read the install index and return its ``key -> records`` mapping.

    Returns:
        The plugin mapping for either index shape. Empty when the file is
        absent, malformed, or not a JSON object.
    """
    data = read_json(path)
    if not isinstance(data, dict):
        return {}

    version = data.get("version", 1)
    if not isinstance(version, (int, float)) or isinstance(version, bool):
        version = 1
    if version >= 2 and isinstance(data.get("plugins"), dict):
        return data["plugins"]
    return data


def load_enabled_map(path: Path) -> dict[str, bool]:
    """Read ``enabledPlugins`` from a settings file. Empty when unavailable."""
    data = read_json(path)
    if not isinstance(data, dict):
        return {}
    enabled = data.get("enabledPlugins")
    if not isinstance(enabled, dict):
        return {}
    return {key: bool(value) for key, value in enabled.items()}


class PluginScanner:
    """Reads the Claude Code plugin index and every plugin it lists.

    Args:
        claude_dir: The ``~/.claude`` directory.
        tool: Tool to stamp on every record.
    """

    def __init__(self, claude_dir: Path, tool: Tool = Tool.CLAUDE_CODE) -> None:
        self.claude_dir = claude_dir
        self.tool = tool

    def scan(self) -> list[Plugin]:
        """Return one ``Plugin`` per well-formed index entry, in index order."""
        index = load_install_index(self.claude_dir / INDEX_RELPATH)
        if not index:
            return []
        enabled_map = load_enabled_map(self.claude_dir / SETTINGS_FILENAME)

        plugins: list[Plugin] = []
        for key, records in index.items():
            if not isinstance(records, list) or not records:
                continue
            record = records[0]
            if not isinstance(record, dict):
                logger.debug("Skipping plugin %s: malformed install record", key)
                continue
            plugins.append(
                self._build_plugin(key, record, enabled_map.get(key, False))
            )
        return plugins

    def _build_plugin(self, key: str, record: dict, enabled: bool) -> Plugin:
        name, marketplace = split_plugin_key(key)
        raw_path = _as_str(record.get("installPath"))
        install_path = Path(raw_path)
        plugin = Plugin(
            name=name,
            tool=self.tool,
            install_path=install_path,
            marketplace=marketplace,
            version=_as_str(record.get("version")),
            enabled=enabled,
        )
        if not raw_path:
            return plugin

        descriptor = read_json(install_path / DESCRIPTOR_RELPATH)
        if isinstance(descriptor, dict):
            plugin.description = _as_str(descriptor.get("description"))
            plugin.author = normalize_author(descriptor.get("author"))

        plugin.items.extend(self._markdown_items(plugin, "commands", SkillType.COMMAND))
        plugin.items.extend(self._markdown_items(plugin, "agents", SkillType.AGENT))
        plugin.items.extend(self._skill_items(plugin))
        plugin.items.extend(self._hook_items(plugin))
        return plugin

    def _make_item(
        self,
        plugin: Plugin,
        name: str,
        artifact_type: SkillType,
        path: Path,
        description: str = "",
        extra: dict[str, str] | None = None,
    ) -> Artifact:
        return Artifact(
            name=name,
            tool=self.tool,
            artifact_type=artifact_type,
            level=SkillLevel.PLUGIN,
            path=path,
            description=description,
            plugin_name=plugin.name,
            marketplace=plugin.marketplace,
            enabled=plugin.enabled,
            extra=extra or {},
        )

    def _markdown_items(
        self, plugin: Plugin, subdir: str, artifact_type: SkillType,
    ) -> list[Artifact]:
        """One artifact per ``<install>/<subdir>/*.md`` file."""
        root = plugin.install_path / subdir
        if not is_dir(root):
            return []

        items: list[Artifact] = []
        for filename in sorted_dir(root):
            md_path = root / filename
            if not filename.endswith(".md") or not is_file(md_path):
                continue
            name, description, extra = split_metadata(
                parse_frontmatter(read_text(md_path)), md_path.stem,
            )
            items.append(
                self._make_item(plugin, name, artifact_type, md_path, description, extra)
            )
        return items

    def _skill_items(self, plugin: Plugin) -> list[Artifact]:
        """One artifact per ``<install>/skills/<child>/SKILL.md``."""
        root = plugin.install_path / "skills"
        if not is_dir(root):
            return []

        items: list[Artifact] = []
        for child in sorted_dir(root):
            skill_md = root / child / SKILL_FILENAME
            if not is_file(skill_md):
                continue
            name, description, extra = split_metadata(
                parse_frontmatter(read_text(skill_md)), child,
            )
            items.append(
                self._make_item(plugin, name, SkillType.SKILL, skill_md, description, extra)
            )
        return items

    def _hook_items(self, plugin: Plugin) -> list[Artifact]:
        """One artifact per hook in ``hooks/hooks.json``, sorted by name.

        A missing or unparsable descriptor contributes nothing.
        """
        hooks_json = plugin.install_path / HOOKS_RELPATH
        data = read_json(hooks_json)
        if not isinstance(data, dict):
            return []
        hooks = data.get("hooks")
        if not isinstance(hooks, dict):
            return []

        description = _as_str(data.get("description"))
        return [
            self._make_item(plugin, hook_name, SkillType.HOOK, hooks_json, description)
            for hook_name in sorted(hooks)
        ]
