"""Render a full trace as a fenced JSON block for insertion into an editor."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fpx_trace.errors import InvalidArgumentError, SerializeError
from fpx_trace.models.trace import Trace
from fpx_trace.rendering.redaction import redact_span

if TYPE_CHECKING:
    from fpx_trace.collector.client import TraceClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedTrace:
    label: str
    text: str


def format_trace(trace: Trace) -> str:
    """Serialize trace as pretty-printed JSON wrapped in a ```json fence.

    Raises:
        SerializeError: If the trace holds a value that cannot be
            written as JSON.
    """
    try:
        body = trace.model_dump_json(by_alias=True, indent=2)
    except ValueError as exc:
        raise SerializeError(str(exc)) from exc
    return f"```json\n{body}\n```"


def render_trace(trace_id: str, client: "TraceClient") -> RenderedTrace:
    """Fetch, redact and format the trace with the given id.

    Every call fetches fresh spans; nothing is cached.

    Args:
        trace_id: Hex trace id chosen by the user.
        client: Collector client used for the fetch.

    Returns:
        RenderedTrace labelled "Trace: {trace_id}".

    Raises:
        InvalidArgumentError: trace_id is empty or not hex.
        FetchError, DecodeError: Propagated from the client.
        SerializeError: The trace could not be formatted.
    """
    if not trace_id:
        raise InvalidArgumentError("no trace id provided")

    spans = client.list_spans(trace_id)
    trace = Trace(trace_id=trace_id, spans=[redact_span(span) for span in spans])
    logger.debug("rendering trace %s with %d spans", trace_id, len(trace.spans))

    return RenderedTrace(label=f"Trace: {trace_id}", text=format_trace(trace))
