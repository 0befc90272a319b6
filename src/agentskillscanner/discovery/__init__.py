"""Discovery of skill artifacts across AI coding assistants.

Public API::

    from agentskillscanner.discovery import MultiScanner

    result = MultiScanner().scan()
    for plugin in result.plugins:
        print(f"{plugin.name}@{plugin.marketplace}: {len(plugin.items)} items")
"""

from __future__ import annotations

from agentskillscanner.discovery.base import ToolScanner
from agentskillscanner.discovery.environment import ScanEnvironment
from agentskillscanner.discovery.multi_scanner import MultiScanner
from agentskillscanner.discovery.registry import ScannerRegistry, default_registry

__all__ = [
    "MultiScanner",
    "ScanEnvironment",
    "ScannerRegistry",
    "ToolScanner",
    "default_registry",
]
