"""fpx-trace commands -- list the slash commands an editor can register."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

from fpx_trace.commands.slash import TraceCommands


def commands() -> None:
    """Show registered slash commands."""
    console = Console()
    table = Table(box=box.SIMPLE, padding=(0, 2))
    table.add_column("Command", style="bold")
    table.add_column("Argument")
    table.add_column("Description")
    for command in TraceCommands.commands:
        table.add_row(
            f"/{command.name}",
            "required" if command.requires_argument else "-",
            command.description,
        )
    console.print(table)
