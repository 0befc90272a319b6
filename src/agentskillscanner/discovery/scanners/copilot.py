"""Scanner for the GitHub Copilot CLI.

Copilot has no skill directories. Its only user-level signal is the MCP
server configuration; each configured server is reported as a command.
Its only project-level signal is the repository instructions file.

Locations:
    user:    ``~/.copilot/mcp-config.json`` (``mcpServers`` or ``servers``)
    project: ``<project>/.github/copilot-instructions.md``
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from agentskillscanner.discovery.base import ToolScanner, resolve_levels
from agentskillscanner.discovery.fs import is_file, read_json, read_text
from agentskillscanner.models import Artifact, ScanResult, SkillLevel, SkillType, Tool

# Top-level keys that hold the server map, in priority order.
_SERVER_KEYS = ("mcpServers", "servers")

_HEADING_PATTERN = re.compile(r"^#+\s*")

INSTRUCTIONS_NAME = "copilot-instructions"
DEFAULT_INSTRUCTIONS_DESCRIPTION = "Copilot project instructions"
DESCRIPTION_MAX_CHARS = 100


def summarize_instructions(text: str) -> str:
    """First non-blank line, de-headed if it is a Markdown heading.

    Non-heading lines are cut to ``DESCRIPTION_MAX_CHARS`` characters.
    """
    first = next((line.strip() for line in text.split("\n") if line.strip()), "")
    if first.startswith("#"):
        return _HEADING_PATTERN.sub("", first)
    return first[:DESCRIPTION_MAX_CHARS]


class CopilotScanner(ToolScanner):
    """GitHub Copilot CLI: MCP servers and repository instructions."""

    tool = Tool.COPILOT

    def scan(self, levels: Iterable[SkillLevel] | None = None) -> ScanResult:
        targets = resolve_levels(levels)
        result = ScanResult()

        if SkillLevel.USER in targets:
            result.artifacts.extend(self._scan_mcp_servers())
        if SkillLevel.PROJECT in targets:
            result.artifacts.extend(self._scan_instructions())
        return result

    def _scan_mcp_servers(self) -> list[Artifact]:
        config_path = self.env.home / ".copilot" / "mcp-config.json"
        data = read_json(config_path)
        if not isinstance(data, dict):
            return []

        servers: dict = {}
        for key in _SERVER_KEYS:
            candidate = data.get(key)
            if isinstance(candidate, dict):
                servers = candidate
                break

        items: list[Artifact] = []
        for server_name in sorted(servers):
            server = servers[server_name]
            description = server.get("description") if isinstance(server, dict) else None
            items.append(Artifact(
                name=server_name,
                tool=self.tool,
                artifact_type=SkillType.COMMAND,
                level=SkillLevel.USER,
                path=config_path,
                description=description if isinstance(description, str) else "",
                extra={"source": "mcp-config"},
            ))
        return items

    def _scan_instructions(self) -> list[Artifact]:
        instructions = self.env.project_dir / ".github" / f"{INSTRUCTIONS_NAME}.md"
        if not is_file(instructions):
            return []
        description = summarize_instructions(read_text(instructions))
        return [Artifact(
            name=INSTRUCTIONS_NAME,
            tool=self.tool,
            artifact_type=SkillType.SKILL,
            level=SkillLevel.PROJECT,
            path=instructions,
            description=description or DEFAULT_INSTRUCTIONS_DESCRIPTION,
        )]
