"""
Rendering functions for versioninfo output.

This module handles all pretty-printing and table formatting.
Core functions return data, this module makes it human-readable.
"""

from rich.table import Table
from rich.console import Console
from rich import box
from typing import Sequence

from .domain import HistoricalVersion, CurrentVersion

console = Console()


def render_history_table(versions: Sequence[HistoricalVersion]) -> None:
    """
    Render released versions as a pretty table.

    Args:
        versions: Versions in the order they should be listed
    """
    if not versions:
        console.print("[yellow]No released versions found.[/yellow]")
        return

    table = Table(
        title="Released Versions",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )

    table.add_column("Version", style="cyan")
    table.add_column("Tag", style="dim")
    table.add_column("Stable", style="green")
    table.add_column("Docs", style="blue")

    for version in versions:
        table.add_row(
            version.version,
            version.raw,
            "✅" if version.is_stable else "",
            version.docs_url
        )

    console.print(table)


def render_current_version(version: CurrentVersion) -> None:
    """Render the resolved current version as a two-column table."""
    table = Table(
        title="Snapshot Version" if version.is_snapshot else "Release Version",
        box=box.ROUNDED,
        show_header=False
    )
    table.add_column("Field", style="bold")
    table.add_column("Value", style="cyan")

    table.add_row("Version", version.version)
    table.add_row("Full", version.full)
    table.add_row("Code name", version.code_name)
    table.add_row("Build", version.build or "-")
    table.add_row("Snapshot", "yes" if version.is_snapshot else "no")

    console.print(table)
