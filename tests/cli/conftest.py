"""Shared fixtures for CLI tests.

CLI scans go through ``ScanEnvironment.current()``, which would consult
the real enterprise locations (``/etc/claude-code`` and friends). The
autouse fixture below blanks that table so a test machine with managed
skills installed cannot leak into the results.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from click.testing import CliRunner

from agentskillscanner.discovery import environment


@pytest.fixture(autouse=True)
def no_enterprise_dirs(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide the machine's enterprise skill roots from CLI scans."""
    monkeypatch.setattr(environment, "ENTERPRISE_DIRS", {})


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Undo any handler/level changes made by ``--debug``."""
    package_logger = logging.getLogger("agentskillscanner")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()
