"""fpx-trace CLI entry point."""

from typing import Optional

import typer

from fpx_trace import __version__
from fpx_trace.cli.commands_cmd import commands
from fpx_trace.cli.list_cmd import list_traces
from fpx_trace.cli.show_cmd import show
from fpx_trace.logging_config import setup_logging

app = typer.Typer(
    name="fpx-trace",
    help="Browse and insert redacted Fiberplane Studio traces",
    no_args_is_help=True,
)

# Register subcommands
app.command()(commands)
app.command(name="list")(list_traces)
app.command()(show)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fpx-trace {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (default: $FPX_TRACE_LOG_LEVEL or WARNING).",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Write logs to stderr as JSON lines.",
    ),
) -> None:
    """Browse and insert redacted Fiberplane Studio traces."""
    setup_logging(log_level, json_output=json_logs)
