"""Building blocks shared by the per-tool scanners.

Most assistants agree on one layout for skills: a root directory holding
one subdirectory per skill, each with a ``SKILL.md`` whose header block
names and describes it::

    skills/
      deploy-helper/
        SKILL.md
      reviewer/
        SKILL.md

Children are visited in sorted order. A child that is not a directory,
or has no regular ``SKILL.md`` file, is skipped silently.
"""

from __future__ import annotations

import logging
from pathlib import Path

from agentskillscanner.discovery.fs import is_dir, is_file, read_text, sorted_dir
from agentskillscanner.models import Artifact, SkillLevel, SkillType, Tool
from agentskillscanner.parsers.frontmatter import parse_frontmatter, split_metadata

logger = logging.getLogger(__name__)

SKILL_FILENAME = "SKILL.md"
VCS_MARKER = ".git"


def read_skill_md(
    skill_dir: Path,
    fallback_name: str,
    tool: Tool,
    level: SkillLevel,
) -> Artifact | None:
    """Build an artifact from ``skill_dir/SKILL.md``.

    Args:
        skill_dir: Directory expected to contain ``SKILL.md``.
        fallback_name: Name used when the header has none.
        tool: Assistant the directory belongs to.
        level: Level the directory was found at.

    Returns:
        The artifact, or None when ``SKILL.md`` is not a regular file.
    """
    skill_md = skill_dir / SKILL_FILENAME
    if not is_file(skill_md):
        logger.debug("No %s in %s, skipping", SKILL_FILENAME, skill_dir)
        return None

    name, description, extra = split_metadata(
        parse_frontmatter(read_text(skill_md)), fallback_name,
    )
    return Artifact(
        name=name,
        tool=tool,
        artifact_type=SkillType.SKILL,
        level=level,
        path=skill_md,
        description=description,
        extra=extra,
    )


def scan_skill_dir(
    root: Path,
    tool: Tool,
    level: SkillLevel,
    skip: frozenset[str] = frozenset(),
) -> list[Artifact]:
    """Collect one artifact per ``<root>/<child>/SKILL.md``.

    Args:
        root: Skills root. A missing root yields an empty list.
        tool: Assistant the root belongs to.
        level: Level to stamp on every artifact.
        skip: Child names to ignore.
    """
    if not is_dir(root):
        return []

    items: list[Artifact] = []
    for child in sorted_dir(root):
        if child in skip:
            continue
        child_path = root / child
        if not is_dir(child_path):
            continue
        artifact = read_skill_md(child_path, child, tool, level)
        if artifact is not None:
            items.append(artifact)
    return items


def find_repo_root(start: Path) -> Path | None:
    """Nearest directory at or above ``start`` holding a ``.git`` directory.

    ``start`` should be absolute; the walk stops at the filesystem root.

    Returns:
        The repository root, or None when the filesystem root is reached
        without finding one.
    """
    current = start
    while True:
        if is_dir(current / VCS_MARKER):
            return current
        if current.parent == current:
            return None
        current = current.parent
