"""Parsing of comma-separated ``--tool`` / ``--level`` filter values."""

from __future__ import annotations

from agentskillscanner.exceptions import FilterError
from agentskillscanner.models import SkillLevel, Tool

LEVEL_TOKENS: dict[str, SkillLevel] = {level.value: level for level in SkillLevel}

TOOL_TOKENS: dict[str, Tool] = {tool.value: tool for tool in Tool}
TOOL_TOKENS["claude"] = Tool.CLAUDE_CODE


def _split(text: str | None) -> list[str]:
    if not text:
        return []
    return [part.strip().lower() for part in text.split(",") if part.strip()]


def parse_levels(text: str | None) -> list[SkillLevel] | None:
    """Parse ``"user,plugin"`` into levels.

    Returns:
        Levels in the order given (duplicates dropped), or None when
        ``text`` is empty, meaning "no filter".

    Raises:
        FilterError: If a token is not a known level.
    """
    levels: list[SkillLevel] = []
    for token in _split(text):
        if token not in LEVEL_TOKENS:
            raise FilterError("level", token, list(LEVEL_TOKENS))
        if LEVEL_TOKENS[token] not in levels:
            levels.append(LEVEL_TOKENS[token])
    return levels or None


def parse_tools(text: str | None) -> list[Tool] | None:
    """Parse ``"claude,codex"`` into tools. ``claude`` aliases ``claude-code``.

    Raises:
        FilterError: If a token is not a known tool.
    """
    tools: list[Tool] = []
    for token in _split(text):
        if token not in TOOL_TOKENS:
            raise FilterError("tool", token, list(TOOL_TOKENS))
        if TOOL_TOKENS[token] not in tools:
            tools.append(TOOL_TOKENS[token])
    return tools or None
