"""CLI package for agentskillscanner."""
