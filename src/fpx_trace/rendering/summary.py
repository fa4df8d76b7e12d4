"""One-line trace summaries for argument completion.

Each qualifying span becomes a TraceChoice whose label reads like
"request: GET /users (200)" and whose selector is the owning trace id.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fpx_trace.models.attributes import (
    FPX_HTTP_REQUEST_PATHNAME,
    HTTP_REQUEST_METHOD,
    HTTP_RESPONSE_STATUS_CODE,
    attribute_text,
    display_status,
    get_attribute,
)
from fpx_trace.rendering.redaction import redact_span

if TYPE_CHECKING:
    from fpx_trace.models.trace import Span, Trace

logger = logging.getLogger(__name__)

DEFAULT_TOP_LEVEL_SPAN = "request"

UNKNOWN_METHOD = "UNKNOWN"
DEFAULT_PATH = "/"
UNKNOWN_STATUS = "???"

NO_TRACES_LABEL = "No traces found"
NO_TRACES_HINT = (
    "No traces found, check if your Fiberplane Studio is running "
    "and if there are traces recorded."
)


@dataclass(frozen=True)
class TraceChoice:
    """A selectable entry: what the user sees and what gets passed back.

    Non-actionable choices are informational only; the host must not
    run a command with their selector.
    """

    label: str
    selector: str
    actionable: bool = True


def no_traces_choice() -> TraceChoice:
    return TraceChoice(label=NO_TRACES_LABEL, selector=NO_TRACES_HINT, actionable=False)


def _text_or_default(span: "Span", key: str, default: str) -> str:
    value = get_attribute(span.attributes, key)
    text = attribute_text(value)
    if text is None:
        if value is not None:
            logger.debug("span %r: %s is not a string, using %r", span.name, key, default)
        return default
    return text


def span_label(span: "Span") -> str:
    """Build the display label for a span.

    Format: "{name}: {method} {path} ({status})". Missing or
    wrong-typed attributes fall back to UNKNOWN, / and ???.
    """
    method = _text_or_default(span, HTTP_REQUEST_METHOD, UNKNOWN_METHOD)
    path = _text_or_default(span, FPX_HTTP_REQUEST_PATHNAME, DEFAULT_PATH)

    status_value = get_attribute(span.attributes, HTTP_RESPONSE_STATUS_CODE)
    status = display_status(status_value)
    if status is None:
        if status_value is not None:
            logger.debug("span %r: unusable status code, using %r", span.name, UNKNOWN_STATUS)
        status = UNKNOWN_STATUS

    return f"{span.name}: {method} {path} ({status})"


def summarize(
    traces: Sequence["Trace"],
    top_level_span: str | None = DEFAULT_TOP_LEVEL_SPAN,
) -> list[TraceChoice]:
    """Turn traces into selectable choices.

    Args:
        traces: Traces as returned by the collector.
        top_level_span: Only spans with this name are listed. None
            lists every span.

    Returns:
        One choice per qualifying span, in trace then span order. If
        traces is empty, a single non-actionable "No traces found"
        choice instead.
    """
    if not traces:
        return [no_traces_choice()]

    choices: list[TraceChoice] = []
    for trace in traces:
        for span in trace.spans:
            if top_level_span is not None and span.name != top_level_span:
                continue
            choices.append(
                TraceChoice(label=span_label(redact_span(span)), selector=trace.trace_id)
            )
    return choices
