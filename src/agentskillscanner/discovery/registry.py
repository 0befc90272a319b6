"""Registry mapping each tool identifier to its scanner.

The ``MultiScanner`` never names concrete scanner classes; it asks the
registry for one per requested tool. ``default_registry()`` wires up the
four built-in assistants. Additional scanners can be added with
``register()``, replacing any scanner already bound to the same tool.
"""

from __future__ import annotations

from collections.abc import Callable

from agentskillscanner.discovery.base import ToolScanner
from agentskillscanner.discovery.environment import ScanEnvironment
from agentskillscanner.discovery.scanners import (
    ClaudeCodeScanner,
    CodexScanner,
    CopilotScanner,
    GeminiScanner,
)
from agentskillscanner.models import Tool

ScannerFactory = Callable[[ScanEnvironment], ToolScanner]


class ScannerRegistry:
    """Tool -> scanner factory table.

    Attributes:
        factories: Registered factories keyed by tool.
    """

    def __init__(self) -> None:
        self.factories: dict[Tool, ScannerFactory] = {}

    def register(self, tool: Tool, factory: ScannerFactory) -> None:
        """Bind ``factory`` to ``tool``.

        Args:
            tool: Tool identifier.
            factory: Callable building a scanner from a ``ScanEnvironment``.
                A ``ToolScanner`` subclass works directly.
        """
        self.factories[tool] = factory

    def create(self, tool: Tool, env: ScanEnvironment) -> ToolScanner | None:
        """Build a fresh scanner for ``tool``, or None if none is registered."""
        factory = self.factories.get(tool)
        return factory(env) if factory is not None else None


def default_registry() -> ScannerRegistry:
    """Create a registry holding the four built-in scanners."""
    registry = ScannerRegistry()
    for scanner_cls in (ClaudeCodeScanner, CodexScanner, GeminiScanner, CopilotScanner):
        registry.register(scanner_cls.tool, scanner_cls)
    return registry
