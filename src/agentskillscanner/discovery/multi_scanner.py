"""Aggregate scan across every supported assistant.

``MultiScanner`` is the entry point of the discovery core. It resolves the
scan environment once, then for each requested tool (in the fixed
``ALL_TOOLS`` order) builds that tool's scanner, runs it with the level
filter and appends its output. Results are concatenated, never sorted, so
callers see tool order first and each scanner's level order within it.

Usage::

    scanner = MultiScanner("~/src/my-project")
    result = scanner.scan(tools={Tool.CLAUDE_CODE}, levels={SkillLevel.USER})
    for artifact in result.artifacts:
        print(artifact.name, artifact.path)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from agentskillscanner.discovery.environment import ScanEnvironment
from agentskillscanner.discovery.registry import ScannerRegistry, default_registry
from agentskillscanner.models import ALL_TOOLS, ScanResult, SkillLevel, Tool

logger = logging.getLogger(__name__)


def _coerce_tools(tools: Iterable[Tool | str]) -> set[Tool]:
    """Accept Tool members or their string values; drop anything unknown."""
    wanted: set[Tool] = set()
    for tool in tools:
        try:
            wanted.add(tool if isinstance(tool, Tool) else Tool(tool))
        except ValueError:
            logger.debug("Skipping unknown tool %r", tool)
    return wanted


class MultiScanner:
    """Runs the per-tool scanners and merges their results.

    Args:
        project_dir: Scan root for project-level lookups. Defaults to the
            working directory. Ignored when ``env`` is given.
        env: Fully specified scan environment (for tests or embedding).
        registry: Tool -> scanner table. Defaults to ``default_registry()``.
    """

    def __init__(
        self,
        project_dir: Path | str | None = None,
        *,
        env: ScanEnvironment | None = None,
        registry: ScannerRegistry | None = None,
    ) -> None:
        if env is None:
            expanded = Path(project_dir).expanduser() if project_dir is not None else None
            env = ScanEnvironment.current(project_dir=expanded)
        self.env = env
        self.registry = registry if registry is not None else default_registry()

    def scan(
        self,
        tools: Iterable[Tool | str] | None = None,
        levels: Iterable[SkillLevel] | None = None,
    ) -> ScanResult:
        """Scan the requested tools and levels.

        Args:
            tools: Tools to include. None means every known tool; unknown
                identifiers are skipped.
            levels: Levels to include. None means all four.

        Returns:
            A new ``ScanResult``; tools contribute in ``ALL_TOOLS`` order.
        """
        wanted = set(ALL_TOOLS) if tools is None else _coerce_tools(tools)
        level_filter = None if levels is None else frozenset(levels)
        result = ScanResult()

        for tool in ALL_TOOLS:
            if tool not in wanted:
                continue
            scanner = self.registry.create(tool, self.env)
            if scanner is None:
                logger.debug("No scanner registered for %s", tool.value)
                continue
            partial = scanner.scan(level_filter)
            logger.debug(
                "%s: %d artifact(s), %d plugin(s)",
                tool.value, len(partial.artifacts), len(partial.plugins),
            )
            result.extend(partial)
        return result
