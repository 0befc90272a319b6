"""agentskillscanner CLI -- Inventory of AI coding assistant skills.

Entry point for the ``agentskillscanner`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    scan -- Discover skills, commands, agents, hooks and plugins.

Usage::

    agentskillscanner scan                          # Everything, every tool
    agentskillscanner scan --json                   # Machine-readable
    agentskillscanner scan -t claude -l plugin -V   # Claude plugins, verbose
    agentskillscanner scan -d ~/src/my-project      # Another project root
"""

from __future__ import annotations

import click

from agentskillscanner import __version__
from agentskillscanner.cli.scan import scan_command


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """agentskillscanner: Find every skill your AI coding assistants can see.

    Scans Claude Code, OpenAI Codex CLI, Gemini CLI and GitHub Copilot CLI
    locations at user, project, plugin and enterprise level.
    """


cli.add_command(scan_command)
