"""Data model and taxonomy shared by every scanner.

An ``Artifact`` is one discoverable unit (skill, command, agent or hook).
A ``Plugin`` is an installed plugin package owning a list of artifacts.
A ``ScanResult`` is the flat inventory handed to the report layer: every
artifact found, plugin items included, plus the plugin records themselves.

These types carry no scanning logic so the CLI and formatters can import
them without pulling in the filesystem code.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


# ---------------------------------------------------------------------------
# Taxonomy
# ---------------------------------------------------------------------------


class Tool(Enum):
    """Supported AI coding assistants. Declaration order is scan order."""

    CLAUDE_CODE = "claude-code"
    CODEX = "codex"
    GEMINI = "gemini"
    COPILOT = "copilot"


class SkillLevel(Enum):
    """Authority scope an artifact was found at."""

    USER = "user"
    PROJECT = "project"
    PLUGIN = "plugin"
    ENTERPRISE = "enterprise"


class SkillType(Enum):
    """Kind of artifact."""

    SKILL = "skill"
    COMMAND = "command"
    AGENT = "agent"
    HOOK = "hook"


ALL_TOOLS: tuple[Tool, ...] = tuple(Tool)
ALL_LEVELS: tuple[SkillLevel, ...] = tuple(SkillLevel)

TOOL_LABELS: dict[Tool, str] = {
    Tool.CLAUDE_CODE: "Claude Code",
    Tool.CODEX: "OpenAI Codex CLI",
    Tool.GEMINI: "Gemini CLI",
    Tool.COPILOT: "GitHub Copilot CLI",
}

LEVEL_LABELS: dict[SkillLevel, str] = {
    SkillLevel.USER: "User",
    SkillLevel.PROJECT: "Project",
    SkillLevel.PLUGIN: "Plugin",
    SkillLevel.ENTERPRISE: "Enterprise",
}

TYPE_LABELS: dict[SkillType, str] = {
    SkillType.SKILL: "skill",
    SkillType.COMMAND: "command",
    SkillType.AGENT: "agent",
    SkillType.HOOK: "hook",
}


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


@dataclass
class Artifact:
    """A single skill, command, agent or hook found on disk.

    Attributes:
        name: Display name. Taken from the header block when present,
            otherwise the containing directory or file name.
        tool: Assistant whose conventions produced this record.
        artifact_type: Skill, command, agent or hook.
        level: User, project, plugin or enterprise.
        path: Absolute path to the defining file.
        description: Free-text summary, may be empty.
        plugin_name: Owning plugin. Empty unless ``level`` is PLUGIN.
        marketplace: Registry the owning plugin came from. Empty unless
            ``level`` is PLUGIN.
        enabled: Always True outside plugins; plugin items inherit the
            plugin's enable state.
        extra: Header-block keys not otherwise modeled. Never contains
            ``name`` or ``description``.
    """

    name: str
    tool: Tool
    artifact_type: SkillType
    level: SkillLevel
    path: Path
    description: str = ""
    plugin_name: str = ""
    marketplace: str = ""
    enabled: bool = True
    extra: dict[str, str] = field(default_factory=dict)


@dataclass
class Plugin:
    """An installed plugin package and the artifacts it contributes.

    Attributes:
        name: Plugin name (the part of the plugin key before the last ``@``).
        tool: Assistant the plugin is installed for.
        install_path: Absolute install directory.
        marketplace: Source registry (the part after the last ``@``).
        version: Installed version, may be empty.
        enabled: Enable state from the tool's settings. False when unset.
        description: From the plugin descriptor, may be empty.
        author: From the plugin descriptor, normalized to a plain string.
        items: Owned artifacts in discovery order.
    """

    name: str
    tool: Tool
    install_path: Path
    marketplace: str = ""
    version: str = ""
    enabled: bool = False
    description: str = ""
    author: str = ""
    items: list[Artifact] = field(default_factory=list)


@dataclass
class ScanResult:
    """Unified output of a scan across tools and levels.

    Attributes:
        artifacts: Every artifact found, in scan order. Plugin items are
            flattened in right after the plugins that own them.
        plugins: Plugin records, in scan order.
    """

    artifacts: list[Artifact] = field(default_factory=list)
    plugins: list[Plugin] = field(default_factory=list)

    def extend(self, other: ScanResult) -> None:
        """Append another result, preserving its order."""
        self.artifacts.extend(other.artifacts)
        self.plugins.extend(other.plugins)

    def by_level(self, level: SkillLevel) -> list[Artifact]:
        """Return the artifacts found at ``level``, in scan order."""
        return [a for a in self.artifacts if a.level is level]

    def by_tool(self, tool: Tool) -> ScanResult:
        """Return the part of this result produced by ``tool``."""
        return ScanResult(
            artifacts=[a for a in self.artifacts if a.tool is tool],
            plugins=[p for p in self.plugins if p.tool is tool],
        )

    def count_by_type(self, level: SkillLevel) -> dict[SkillType, int]:
        """Count artifacts at ``level`` per artifact type (all types present)."""
        counts = Counter(a.artifact_type for a in self.by_level(level))
        return {stype: counts.get(stype, 0) for stype in SkillType}
