"""Slash command surface consumed by an editor host.

The host calls two entry points:

  * complete_argument(name, args): argument completions for a command.
  * run_command(name, args): the text to insert plus labelled sections.

Only the "trace" command is registered. Unknown names raise
UnknownCommandError rather than returning nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from fpx_trace.collector.client import TraceClient
from fpx_trace.errors import InvalidArgumentError, UnknownCommandError
from fpx_trace.models.config import TraceConfig
from fpx_trace.rendering.renderer import render_trace
from fpx_trace.rendering.summary import DEFAULT_TOP_LEVEL_SPAN, summarize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlashCommand:
    """A command the host can register with the editor."""

    name: str
    description: str
    requires_argument: bool = False


@dataclass
class ArgumentCompletion:
    """One completion entry.

    new_text is inserted as the command argument. When run_command is
    False the entry is informational and must not be executed.
    """

    label: str
    new_text: str
    run_command: bool = True


@dataclass
class OutputSection:
    """A labelled region of the output text, as a UTF-8 byte range."""

    label: str
    range: range


@dataclass
class SlashCommandOutput:
    text: str
    sections: list[OutputSection] = field(default_factory=list)


TRACE_COMMAND = SlashCommand(
    name="trace",
    description="Insert a trace from Fiberplane Studio",
    requires_argument=True,
)


class TraceCommands:
    """Dispatch slash command calls to the trace pipeline.

    Holds no state between calls besides the client settings; every
    completion and run fetches fresh data from the collector.
    """

    commands: tuple[SlashCommand, ...] = (TRACE_COMMAND,)

    def __init__(
        self,
        client: TraceClient,
        top_level_span: str | None = DEFAULT_TOP_LEVEL_SPAN,
    ) -> None:
        self.client = client
        self.top_level_span = top_level_span

    @classmethod
    def from_config(cls, config: TraceConfig) -> "TraceCommands":
        return cls(TraceClient.from_config(config), top_level_span=config.top_level_span)

    def _resolve(self, name: str) -> SlashCommand:
        for command in self.commands:
            if command.name == name:
                return command
        logger.debug("unknown slash command %r", name)
        raise UnknownCommandError(name)

    def complete_argument(
        self, command_name: str, args: Sequence[str] = ()
    ) -> list[ArgumentCompletion]:
        """List selectable traces as argument completions.

        An empty collector yields a single non-actionable entry. Fetch
        and decode failures propagate.

        Raises:
            UnknownCommandError: command_name is not registered.
            FetchError, DecodeError: Propagated from the client.
        """
        self._resolve(command_name)
        traces = self.client.list_traces()
        return [
            ArgumentCompletion(
                label=choice.label,
                new_text=choice.selector,
                run_command=choice.actionable,
            )
            for choice in summarize(traces, top_level_span=self.top_level_span)
        ]

    def run_command(self, command_name: str, args: Sequence[str]) -> SlashCommandOutput:
        """Render the trace named by the single argument.

        Raises:
            UnknownCommandError: command_name is not registered.
            InvalidArgumentError: args is empty or holds more than one id.
                No network call is made in that case.
            FetchError, DecodeError, SerializeError: From the pipeline.
        """
        self._resolve(command_name)
        if not args:
            raise InvalidArgumentError("no trace id provided")
        if len(args) > 1:
            raise InvalidArgumentError(
                f"expected exactly one trace id, got {len(args)} arguments"
            )

        rendered = render_trace(args[0], self.client)
        return SlashCommandOutput(
            text=rendered.text,
            sections=[
                OutputSection(
                    label=rendered.label,
                    range=range(0, len(rendered.text.encode("utf-8"))),
                )
            ],
        )
