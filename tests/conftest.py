"""Shared fixtures for agentskillscanner tests.

Every scan in the suite runs against a synthetic machine built under
``tmp_path``: a fake home directory, a project directory, and one
enterprise root per tool. Nothing touches the real home or ``/etc``.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from agentskillscanner.discovery.environment import ScanEnvironment
from agentskillscanner.models import Tool


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """An empty fake home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """An empty project directory (not inside a git checkout)."""
    path = tmp_path / "work" / "project"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def enterprise(tmp_path: Path) -> dict[Tool, Path]:
    """Per-tool enterprise roots (not created until a test needs them)."""
    return {
        Tool.CLAUDE_CODE: tmp_path / "managed" / "claude-code",
        Tool.CODEX: tmp_path / "managed" / "codex" / "skills",
    }


@pytest.fixture
def env(home: Path, project: Path, enterprise: dict[Tool, Path]) -> ScanEnvironment:
    """Scan environment wired to the synthetic home, project and enterprise roots."""
    return ScanEnvironment(
        project_dir=project,
        home=home,
        platform="linux",
        enterprise_dirs=enterprise,
    )


@pytest.fixture
def make_skill() -> Callable[..., Path]:
    """Return a helper creating ``<root>/<dirname>/SKILL.md``.

    Usage::

        make_skill(root, "deploy", name="Deploy", description="Ships it")
        make_skill(root, "raw", text="no header at all")
    """

    def _make(
        root: Path,
        dirname: str,
        text: str | None = None,
        **header: str,
    ) -> Path:
        skill_dir = root / dirname
        skill_dir.mkdir(parents=True, exist_ok=True)
        if text is None:
            lines = ["---"] + [f"{k}: {v}" for k, v in header.items()] + ["---", ""]
            text = "\n".join(lines) + f"# {dirname}\n"
        skill_md = skill_dir / "SKILL.md"
        skill_md.write_text(text, encoding="utf-8")
        return skill_md

    return _make


@pytest.fixture
def write_json() -> Callable[[Path, Any], Path]:
    """Return a helper writing JSON to a path, creating parent directories."""

    def _write(path: Path, data: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
