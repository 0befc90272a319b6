"""Ambient inputs of a scan, captured once and passed explicitly.

Scanners never call ``Path.home()`` or read ``sys.platform`` themselves.
Everything machine-specific lives on a ``ScanEnvironment`` so tests can
point a scan at a synthetic home, project and enterprise root under
``tmp_path``.

Platform Notes:
    Enterprise (managed) skill locations are system-wide paths that differ
    per OS family. Platforms not listed in ``ENTERPRISE_DIRS`` have no
    enterprise level at all.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from agentskillscanner.models import Tool

# Managed-policy roots per tool, keyed by ``sys.platform`` value.
ENTERPRISE_DIRS: dict[Tool, dict[str, str]] = {
    Tool.CLAUDE_CODE: {
        "darwin": "/Library/Application Support/ClaudeCode",
        "linux": "/etc/claude-code",
        "win32": r"C:\ProgramData\ClaudeCode",
    },
    Tool.CODEX: {
        "darwin": "/etc/codex/skills",
        "linux": "/etc/codex/skills",
    },
}


@dataclass(frozen=True)
class ScanEnvironment:
    """Machine-specific inputs for one scan.

    Attributes:
        project_dir: Absolute scan root for project-level lookups.
        home: User home directory.
        platform: ``sys.platform``-style identifier ("darwin", "linux",
            "win32", ...).
        enterprise_dirs: Per-tool overrides of the enterprise root.
    """

    project_dir: Path
    home: Path
    platform: str = sys.platform
    enterprise_dirs: Mapping[Tool, Path] = field(default_factory=dict)

    @classmethod
    def current(
        cls,
        project_dir: Path | str | None = None,
        home: Path | str | None = None,
    ) -> ScanEnvironment:
        """Build an environment for the running process.

        Args:
            project_dir: Scan root. Defaults to the working directory.
            home: Home directory. Defaults to ``Path.home()``.
        """
        root = Path(project_dir) if project_dir is not None else Path.cwd()
        return cls(
            project_dir=root.resolve(),
            home=Path(home) if home is not None else Path.home(),
            platform=sys.platform,
        )

    def enterprise_dir(self, tool: Tool) -> Path | None:
        """Enterprise root for ``tool`` on this platform, or None."""
        if tool in self.enterprise_dirs:
            return self.enterprise_dirs[tool]
        location = ENTERPRISE_DIRS.get(tool, {}).get(self.platform)
        return Path(location) if location else None
