"""Rich output formatting for the agentskillscanner CLI.

Renders a ``ScanResult`` as a terminal report: one table per non-plugin
level, a tree per plugin, and a summary line. Rendering never changes the
order the scanners produced.

Type Color Mapping:
    command = magenta, agent = blue, skill = green, hook = yellow
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from agentskillscanner import __version__
from agentskillscanner.models import (
    LEVEL_LABELS,
    TOOL_LABELS,
    TYPE_LABELS,
    Artifact,
    Plugin,
    ScanResult,
    SkillLevel,
    SkillType,
)

_TYPE_STYLES: dict[SkillType, str] = {
    SkillType.COMMAND: "magenta",
    SkillType.AGENT: "blue",
    SkillType.SKILL: "green",
    SkillType.HOOK: "yellow",
}

# Levels rendered as flat tables, in report order. Plugins come last.
_TABLE_LEVELS = (SkillLevel.USER, SkillLevel.PROJECT, SkillLevel.ENTERPRISE)

console = Console()


def type_style(artifact_type: SkillType) -> str:
    """Return the Rich style string for an artifact type."""
    return _TYPE_STYLES.get(artifact_type, "dim")


def truncate(text: str, max_len: int = 72) -> str:
    """Collapse newlines and cut ``text`` to ``max_len`` with an ellipsis."""
    clean = text.replace("\n", " ").strip()
    if len(clean) <= max_len:
        return clean
    return clean[: max_len - 3] + "..."


def display_name(item: Artifact, plugin: Plugin) -> str:
    """Name as the user would type it: commands become ``/plugin:command``."""
    if item.artifact_type is not SkillType.COMMAND:
        return item.name
    if item.name != plugin.name:
        return f"/{plugin.name}:{item.name}"
    return f"/{item.name}"


def print_scan_report(
    result: ScanResult,
    verbose: bool = False,
    out: Console | None = None,
) -> None:
    """Print the full terminal report for a scan.

    Args:
        result: Scan to render.
        verbose: Also show full descriptions and file paths.
        out: Console to print to. Defaults to the module console.
    """
    out = out or console
    out.print(Panel(
        Text(f"Agent Skill Scan Report  v{__version__}", style="bold"),
        style="cyan",
    ))

    any_output = False
    for level in _TABLE_LEVELS:
        items = result.by_level(level)
        if not items:
            continue
        any_output = True
        out.print(_level_table(level, items, verbose))

    if result.plugins or result.by_level(SkillLevel.PLUGIN):
        any_output = True
        out.print(Text(f"{LEVEL_LABELS[SkillLevel.PLUGIN]} level", style="bold"))
        for plugin in result.plugins:
            out.print(_plugin_tree(plugin, verbose))

    if not any_output:
        out.print("[dim]No skills found.[/dim]")

    _print_summary(result, out)


def _level_table(level: SkillLevel, items: list[Artifact], verbose: bool) -> Table:
    table = Table(
        title=f"{LEVEL_LABELS[level]} level", show_header=True, header_style="bold",
    )
    table.add_column("Name", style="bold")
    table.add_column("Tool", style="dim")
    table.add_column("Type", justify="center")
    table.add_column("Description")
    if verbose:
        table.add_column("Path", style="dim")

    for item in items:
        description = item.description or "(no description)"
        # Text() keeps square brackets in names literal instead of markup.
        row = [
            Text(item.name),
            TOOL_LABELS[item.tool],
            Text(TYPE_LABELS[item.artifact_type], style=type_style(item.artifact_type)),
            Text(description if verbose else truncate(description)),
        ]
        if verbose:
            row.append(Text(str(item.path)))
        table.add_row(*row)
    return table


def _plugin_tree(plugin: Plugin, verbose: bool) -> Tree:
    status = (
        Text("enabled", style="bold green") if plugin.enabled
        else Text("disabled", style="bold red")
    )
    label = Text.assemble(
        (plugin.name, "bold"),
        (f" @ {plugin.marketplace}" if plugin.marketplace else "", "dim"),
        "  [", status, "]",
        (f"  {TOOL_LABELS[plugin.tool]}", "dim"),
    )
    tree = Tree(label)
    if verbose:
        if plugin.description:
            tree.add(Text(truncate(plugin.description, 68), style="dim"))
        tree.add(Text(f"path: {plugin.install_path}", style="dim"))

    if not plugin.items:
        tree.add(Text("(no items found)", style="dim"))
        return tree

    for item in plugin.items:
        node = tree.add(Text.assemble(
            (display_name(item, plugin), type_style(item.artifact_type)),
            (f"  [{TYPE_LABELS[item.artifact_type]}]", "dim"),
        ))
        if verbose and item.description:
            node.add(Text(truncate(item.description, 60), style="dim"))
    return tree


def _print_summary(result: ScanResult, out: Console) -> None:
    """Print level counts, plugin counts and the grand total."""
    counts = result.count_by_type(SkillLevel.PLUGIN)
    enabled = sum(1 for p in result.plugins if p.enabled)

    parts = [
        f"user [bold]{len(result.by_level(SkillLevel.USER))}[/bold]",
        f"project [bold]{len(result.by_level(SkillLevel.PROJECT))}[/bold]",
        f"enterprise [bold]{len(result.by_level(SkillLevel.ENTERPRISE))}[/bold]",
    ]
    out.print("Summary: " + " | ".join(parts))

    detail = (
        f"commands {counts[SkillType.COMMAND]} / agents {counts[SkillType.AGENT]}"
        f" / skills {counts[SkillType.SKILL]}"
    )
    if counts[SkillType.HOOK]:
        detail += f" / hooks {counts[SkillType.HOOK]}"
    out.print(
        f"Plugins: [bold]{len(result.plugins)}[/bold] "
        f"([green]{enabled} enabled[/green])  items: {detail}"
    )
    out.print(f"[dim]Total: {len(result.artifacts)} item(s)[/dim]")
