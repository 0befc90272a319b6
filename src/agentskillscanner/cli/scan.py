"""``agentskillscanner scan`` -- Inventory skills for AI coding assistants.

Scans the user, project, plugin and enterprise locations of every
supported assistant (Claude Code, Codex CLI, Gemini CLI, Copilot CLI) and
prints the result as a terminal report or as JSON.

Exit Codes:
    0 -- Scan completed (finding nothing is not an error).
    2 -- Invalid option value, e.g. an unknown ``--tool`` or ``--level``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click

from agentskillscanner import __version__
from agentskillscanner.discovery import MultiScanner, ScanEnvironment
from agentskillscanner.exceptions import FilterError
from agentskillscanner.filters import parse_levels, parse_tools
from agentskillscanner.models import Artifact, Plugin, ScanResult, SkillLevel


def artifact_to_dict(artifact: Artifact) -> dict[str, Any]:
    """Convert an artifact to a JSON-serializable dict."""
    return {
        "name": artifact.name,
        "tool": artifact.tool.value,
        "skill_type": artifact.artifact_type.value,
        "level": artifact.level.value,
        "description": artifact.description,
        "path": str(artifact.path),
        "plugin_name": artifact.plugin_name,
        "marketplace": artifact.marketplace,
        "enabled": artifact.enabled,
        "extra": dict(artifact.extra),
    }


def plugin_to_dict(plugin: Plugin) -> dict[str, Any]:
    """Convert a plugin (with its items) to a JSON-serializable dict."""
    return {
        "name": plugin.name,
        "tool": plugin.tool.value,
        "marketplace": plugin.marketplace,
        "install_path": str(plugin.install_path),
        "version": plugin.version,
        "enabled": plugin.enabled,
        "description": plugin.description,
        "author": plugin.author,
        "items": [artifact_to_dict(item) for item in plugin.items],
    }


def result_to_dict(result: ScanResult) -> dict[str, Any]:
    """Convert a scan result to the JSON report structure.

    Returns:
        Dict with ``skills``, ``plugins`` and ``summary`` keys.
    """
    return {
        "version": __version__,
        "skills": [artifact_to_dict(a) for a in result.artifacts],
        "plugins": [plugin_to_dict(p) for p in result.plugins],
        "summary": {
            "user": len(result.by_level(SkillLevel.USER)),
            "project": len(result.by_level(SkillLevel.PROJECT)),
            "enterprise": len(result.by_level(SkillLevel.ENTERPRISE)),
            "plugin_count": len(result.plugins),
            "plugin_items": len(result.by_level(SkillLevel.PLUGIN)),
            "total": len(result.artifacts),
        },
    }


_DEBUG_HANDLER_NAME = "agentskillscanner-cli-debug"


def _configure_logging(debug: bool) -> None:
    """Send package debug logs to stderr when ``--debug`` is given.

    At most one CLI handler is attached; a repeated call replaces it so the
    handler always writes to the current ``sys.stderr``.
    """
    if not debug:
        return
    package_logger = logging.getLogger("agentskillscanner")
    for existing in list(package_logger.handlers):
        if existing.get_name() == _DEBUG_HANDLER_NAME:
            package_logger.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_DEBUG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


@click.command("scan")
@click.option(
    "--json", "-j", "as_json",
    is_flag=True,
    default=False,
    help="Output the inventory as JSON.",
)
@click.option(
    "--project-dir", "-d",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project directory (default: current working directory).",
)
@click.option(
    "--home",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Home directory to scan instead of the current user's.",
)
@click.option(
    "--level", "-l",
    default=None,
    help="Levels to include: user, project, plugin, enterprise (comma separated).",
)
@click.option(
    "--tool", "-t",
    default=None,
    help="Tools to include: claude-code, codex, gemini, copilot (comma separated).",
)
@click.option(
    "--verbose", "-V",
    is_flag=True,
    default=False,
    help="Show full descriptions and paths.",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Log skipped and malformed files to stderr.",
)
def scan_command(
    as_json: bool,
    project_dir: Path | None,
    home: Path | None,
    level: str | None,
    tool: str | None,
    verbose: bool,
    debug: bool,
) -> None:
    """Scan and report all available skills for AI coding assistants.

    Covers user, project, plugin and enterprise levels of Claude Code,
    OpenAI Codex CLI, Gemini CLI and GitHub Copilot CLI.
    """
    _configure_logging(debug)

    try:
        levels = parse_levels(level)
    except FilterError as exc:
        raise click.BadParameter(str(exc), param_hint="'--level'") from exc
    try:
        tools = parse_tools(tool)
    except FilterError as exc:
        raise click.BadParameter(str(exc), param_hint="'--tool'") from exc

    env = ScanEnvironment.current(project_dir=project_dir, home=home)
    result = MultiScanner(env=env).scan(tools=tools, levels=levels)

    if as_json:
        click.echo(json.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
    else:
        from agentskillscanner.cli.output import print_scan_report
        print_scan_report(result, verbose=verbose)
