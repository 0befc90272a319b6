"""Parsers for the text formats found inside skill artifacts."""

from __future__ import annotations

from agentskillscanner.parsers.frontmatter import parse_frontmatter, split_metadata

__all__ = ["parse_frontmatter", "split_metadata"]
