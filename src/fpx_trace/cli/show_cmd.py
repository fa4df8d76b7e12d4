"""fpx-trace show -- print a redacted trace as a fenced JSON block."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from fpx_trace.commands.slash import TRACE_COMMAND, TraceCommands
from fpx_trace.errors import TraceError
from fpx_trace.models.config import load_config


def show(
    trace_id: str = typer.Argument(..., help="Hex trace id, as shown by 'fpx-trace list'"),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Print only the fenced JSON, without the section label",
    ),
) -> None:
    """Render one trace the way it would be inserted into the editor."""
    console = Console(stderr=True)
    commands = TraceCommands.from_config(load_config())

    try:
        output = commands.run_command(TRACE_COMMAND.name, [trace_id])
    except TraceError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    if not raw:
        for section in output.sections:
            typer.echo(f"# {section.label}")
    # JSON contains square brackets, so bypass rich markup entirely.
    typer.echo(output.text)
