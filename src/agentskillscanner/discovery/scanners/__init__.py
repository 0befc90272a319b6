"""Per-tool scanner implementations, one module per assistant."""

from __future__ import annotations

from agentskillscanner.discovery.scanners.claude_code import ClaudeCodeScanner
from agentskillscanner.discovery.scanners.codex import CodexScanner
from agentskillscanner.discovery.scanners.copilot import CopilotScanner
from agentskillscanner.discovery.scanners.gemini import GeminiScanner

__all__ = [
    "ClaudeCodeScanner",
    "CodexScanner",
    "CopilotScanner",
    "GeminiScanner",
]
