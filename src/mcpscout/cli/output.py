"""Rich output formatting helpers for the mcpscout CLI.

Renders an ``Inventory`` as count lines followed by one table per
declaration family. Kept separate from the command module so the
formatting can be reused by other front ends.
"""

from __future__ import annotations

import json

from rich.console import Console
from rich.table import Table

from mcpscout.inventory.models import Inventory

console = Console()

# Longer descriptions are cut in table cells; JSON output keeps them whole.
_MAX_DESCRIPTION = 80


def format_schema(schema: dict[str, str]) -> str:
    """Render an inferred input schema as ``field: kind`` pairs."""
    if not schema:
        return "-"
    return ", ".join(f"{name}: {kind}" for name, kind in schema.items())


def summary_lines(inventory: Inventory) -> list[str]:
    """Return the ``Found N ...`` lines for the non-empty families."""
    summary = inventory.summary
    lines: list[str] = []
    if summary.tool_count:
        lines.append(f"Found {summary.tool_count} tool(s)")
    if summary.resource_count:
        lines.append(f"Found {summary.resource_count} resource(s)")
    if summary.prompt_count:
        lines.append(f"Found {summary.prompt_count} prompt(s)")
    return lines


def print_inventory(inventory: Inventory) -> None:
    """Print the summary and per-family tables for an inventory.

    Args:
        inventory: Result of a scan.
    """
    lines = summary_lines(inventory)
    if not lines:
        console.print("[dim]No MCP declarations found.[/dim]")
    for line in lines:
        console.print(f"[green]{line}[/green]")

    if inventory.tools:
        table = Table(title="Tools", show_header=True, header_style="bold")
        table.add_column("Name", style="bold")
        table.add_column("Description")
        table.add_column("Input schema", style="cyan")
        table.add_column("File", style="dim")
        for tool in inventory.tools:
            desc = tool.description
            if len(desc) > _MAX_DESCRIPTION:
                desc = desc[: _MAX_DESCRIPTION - 3] + "..."
            table.add_row(tool.name, desc, format_schema(tool.input_schema), tool.file)
        console.print(table)

    if inventory.resources:
        table = Table(title="Resources", show_header=True, header_style="bold")
        table.add_column("Name", style="bold")
        table.add_column("URI")
        table.add_column("File", style="dim")
        for res in inventory.resources:
            table.add_row(res.name, res.uri, res.file)
        console.print(table)

    if inventory.prompts:
        table = Table(title="Prompts", show_header=True, header_style="bold")
        table.add_column("Name", style="bold")
        table.add_column("File", style="dim")
        for prompt in inventory.prompts:
            table.add_row(prompt.name, prompt.file)
        console.print(table)

    _print_skipped(inventory)


def _print_skipped(inventory: Inventory) -> None:
    if not inventory.skipped:
        return
    console.print(
        f"[yellow]Skipped {len(inventory.skipped)} unreadable file(s):[/yellow]"
    )
    for skipped in inventory.skipped:
        console.print(f"  [yellow]- {skipped.path}: {skipped.reason}[/yellow]")


def inventory_json(inventory: Inventory) -> str:
    """Serialize an inventory for the downstream generator."""
    return json.dumps(inventory.to_dict(), indent=2)
