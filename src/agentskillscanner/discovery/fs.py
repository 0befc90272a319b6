"""Failure-tolerant filesystem probes.

Every helper here collapses I/O errors (missing path, permission denied,
not-a-directory, malformed JSON) to the "absent" value of its return
type. A half-installed or misconfigured tool must never abort a scan of
the others, so callers can probe freely without try/except.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def is_dir(path: Path) -> bool:
    """True if ``path`` is a directory (symlinks followed)."""
    try:
        return path.is_dir()
    except (OSError, ValueError):
        return False


def is_file(path: Path) -> bool:
    """True if ``path`` is a regular file (symlinks followed)."""
    try:
        return path.is_file()
    except (OSError, ValueError):
        return False


def sorted_dir(path: Path) -> list[str]:
    """Names of the immediate children of ``path`` in lexicographic order.

    Returns an empty list when the directory cannot be listed.
    """
    try:
        return sorted(entry.name for entry in path.iterdir())
    except (OSError, ValueError) as exc:
        logger.debug("Cannot list %s: %s", path, exc)
        return []


def read_text(path: Path) -> str:
    """Full contents of ``path`` decoded as UTF-8, or ``""`` when it cannot be read.

    Undecodable bytes become U+FFFD so the rest of the file stays usable.
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except (OSError, ValueError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return ""


def read_json(path: Path) -> Any | None:
    """Parse ``path`` as JSON.

    Returns:
        The decoded value, or None when the file is missing, unreadable,
        not valid JSON or nested too deeply to decode.
    """
    if not is_file(path):
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8", errors="replace"))
    except (OSError, ValueError, RecursionError) as exc:
        logger.debug("Ignoring malformed JSON in %s: %s", path, exc)
        return None
