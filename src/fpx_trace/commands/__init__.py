"""Editor-facing slash command entry points."""

from fpx_trace.commands.slash import (
    TRACE_COMMAND,
    ArgumentCompletion,
    OutputSection,
    SlashCommand,
    SlashCommandOutput,
    TraceCommands,
)

__all__ = [
    "TRACE_COMMAND",
    "ArgumentCompletion",
    "OutputSection",
    "SlashCommand",
    "SlashCommandOutput",
    "TraceCommands",
]
