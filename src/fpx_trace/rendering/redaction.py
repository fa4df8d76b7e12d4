"""Redaction of sensitive span attributes.

Removes captured environment variables entirely and masks credential
headers before any span is summarized or rendered. Redaction never
mutates its input: it returns new Span/Trace values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fpx_trace.models.attributes import (
    FPX_HTTP_REQUEST_ENV,
    HTTP_AUTHORIZATION,
    HTTP_NEON_CONNECTION_STRING,
    StringValue,
    to_raw,
)

if TYPE_CHECKING:
    from fpx_trace.models.trace import Span, Trace

MASK = "*****"

# Keys dropped from the attribute map altogether.
REMOVED_KEYS: frozenset[str] = frozenset({FPX_HTTP_REQUEST_ENV})

# Keys whose value is replaced with MASK when present.
MASKED_KEYS: frozenset[str] = frozenset({HTTP_AUTHORIZATION, HTTP_NEON_CONNECTION_STRING})


def redact_span(span: "Span") -> "Span":
    """Return a copy of span with sensitive attributes removed or masked.

    Idempotent: redacting an already redacted span yields an equal span.

    Args:
        span: The span to redact.

    Returns:
        A new Span. Attributes outside REMOVED_KEYS and MASKED_KEYS are
        passed through unchanged.
    """
    masked = to_raw(StringValue(MASK))
    attributes = {}
    for key, value in span.attributes.items():
        if key in REMOVED_KEYS:
            continue
        attributes[key] = masked if key in MASKED_KEYS else value
    return span.with_attributes(attributes)


def redact_trace(trace: "Trace") -> "Trace":
    """Return a copy of trace with every span redacted."""
    return trace.model_copy(
        update={"spans": [redact_span(span) for span in trace.spans]}
    )
