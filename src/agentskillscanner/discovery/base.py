"""Interface implemented by every per-tool scanner.

Each assistant keeps its skills in its own places. A ``ToolScanner``
encodes one assistant's conventions for the four levels and normalizes
whatever it finds into ``Artifact`` and ``Plugin`` records. Scanners are
cheap to build and hold no state beyond their ``ScanEnvironment``, so the
aggregator creates a fresh one for every scan.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import ClassVar

from agentskillscanner.discovery.environment import ScanEnvironment
from agentskillscanner.models import ALL_LEVELS, ScanResult, SkillLevel, Tool


class ToolScanner(ABC):
    """Scans one assistant's user, project, plugin and enterprise locations.

    Attributes:
        tool: The assistant this scanner understands.
        env: Machine-specific inputs (home, project root, platform).
    """

    tool: ClassVar[Tool]

    def __init__(self, env: ScanEnvironment) -> None:
        self.env = env

    @abstractmethod
    def scan(self, levels: Iterable[SkillLevel] | None = None) -> ScanResult:
        """Scan the requested levels.

        Levels the assistant has no concept of contribute nothing. Must not
        raise on missing or malformed files.

        Args:
            levels: Levels to scan. None means all four.

        Returns:
            Artifacts in level order (user, project, plugin, enterprise),
            plus any plugin records.
        """


def resolve_levels(
    levels: Iterable[SkillLevel | str] | None,
) -> frozenset[SkillLevel]:
    """Turn an optional level filter into the set of levels to scan.

    String values ("user", "plugin", ...) are accepted; unknown entries
    are dropped, so a filter naming nothing valid scans nothing.
    """
    if levels is None:
        return frozenset(ALL_LEVELS)
    resolved: set[SkillLevel] = set()
    for level in levels:
        try:
            resolved.add(level if isinstance(level, SkillLevel) else SkillLevel(level))
        except ValueError:
            continue
    return frozenset(resolved)
