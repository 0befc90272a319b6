"""Header-block parser for skill, command and agent Markdown files.

Skill files open with a metadata block delimited by ``---`` lines::

    ---
    name: deploy-helper
    description: |
      Assists with deployment
      to production servers
    allowed-tools: Bash
    ---

This is deliberately NOT a YAML parser. It understands a flat, line
oriented subset: ``key: value`` pairs, plus the block scalars ``|`` and
``>`` whose indented continuation lines are folded into one
space-separated string. Nested structures (lists, maps) are skipped, so
every value in the returned mapping is a plain string.

A file without a leading header, or with an unterminated one, yields an
empty mapping. Parsing never raises.
"""

from __future__ import annotations

import re

# Opening delimiter at offset 0, optional body, closing delimiter line.
_HEADER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?=\r?\n|\Z)",
    re.DOTALL,
)

# ``key: value`` where key starts with a word character.
_ENTRY_PATTERN = re.compile(r"^(\w[\w-]*):\s*(.*)")

# Values that open a multi-line continuation.
_BLOCK_MARKERS = frozenset({"|", ">"})


def parse_frontmatter(text: str) -> dict[str, str]:
    """Extract the header block of ``text`` as a flat string mapping.

    Args:
        text: Full file contents.

    Returns:
        Mapping of header keys to string values. Empty when the text does
        not start with a header block.
    """
    match = _HEADER_PATTERN.match(text)
    if match is None:
        return {}

    result: dict[str, str] = {}
    block_key: str | None = None
    fragments: list[str] = []

    for line in (match.group(1) or "").split("\n"):
        if block_key is not None:
            if line.startswith("  ") or not line.strip():
                fragments.append(line.strip())
                continue
            result[block_key] = _fold(fragments)
            block_key = None
            fragments = []

        entry = _ENTRY_PATTERN.match(line)
        if entry is None:
            continue
        key, value = entry.group(1), entry.group(2).strip()
        if value in _BLOCK_MARKERS:
            block_key = key
        else:
            result[key] = value

    if block_key is not None:
        result[block_key] = _fold(fragments)
    return result


def _fold(fragments: list[str]) -> str:
    """Join continuation lines with single spaces, dropping blanks."""
    return " ".join(f for f in fragments if f)


def split_metadata(
    fm: dict[str, str], fallback_name: str,
) -> tuple[str, str, dict[str, str]]:
    """Lift ``name`` and ``description`` out of a parsed header.

    Args:
        fm: Mapping returned by ``parse_frontmatter``. Not modified.
        fallback_name: Name to use when the header has no ``name`` key. An
            explicitly empty ``name:`` is kept as ``""``.

    Returns:
        ``(name, description, extra)`` where ``extra`` holds every other key.
    """
    extra = dict(fm)
    name = extra.pop("name", None)
    description = extra.pop("description", "")
    return (fallback_name if name is None else name), description, extra
