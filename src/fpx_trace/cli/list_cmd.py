"""fpx-trace list -- show the traces a user could insert.

Runs the same argument-completion path an editor would, and prints
each entry with the trace id it selects.
"""

from __future__ import annotations

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fpx_trace.commands.slash import TRACE_COMMAND, TraceCommands
from fpx_trace.errors import TraceError
from fpx_trace.models.config import load_config


def list_traces() -> None:
    """List recorded traces from the local Fiberplane Studio."""
    console = Console()
    commands = TraceCommands.from_config(load_config())

    try:
        completions = commands.complete_argument(TRACE_COMMAND.name)
    except TraceError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    actionable = [c for c in completions if c.run_command]
    if not actionable:
        for completion in completions:
            console.print(f"[dim]{escape(completion.new_text)}[/dim]")
        if not completions:
            console.print("[dim]No top-level spans to list.[/dim]")
        raise typer.Exit(code=0)

    table = Table(box=box.SIMPLE, padding=(0, 2))
    table.add_column("Label", style="bold")
    table.add_column("Trace ID", no_wrap=True)
    for completion in actionable:
        table.add_row(escape(completion.label), completion.new_text)

    console.print(table)
    console.print(f"\n[dim]{len(actionable)} entries[/dim]")
