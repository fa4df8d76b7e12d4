"""Rendering subpackage - redaction, completion summaries and full trace output."""

from fpx_trace.rendering.redaction import MASK, redact_span, redact_trace
from fpx_trace.rendering.renderer import RenderedTrace, format_trace, render_trace
from fpx_trace.rendering.summary import TraceChoice, span_label, summarize

__all__ = [
    "MASK",
    "RenderedTrace",
    "TraceChoice",
    "format_trace",
    "redact_span",
    "redact_trace",
    "render_trace",
    "span_label",
    "summarize",
]
