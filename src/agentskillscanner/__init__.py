"""agentskillscanner: Inventory of skills installed for AI coding assistants."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
