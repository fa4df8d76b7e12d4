"""fpx-trace data models - re-exports all public model classes."""

from fpx_trace.models.attributes import (
    AttributeValue,
    DoubleValue,
    IntValue,
    OtherValue,
    StringValue,
    classify,
)
from fpx_trace.models.config import TraceConfig, load_config
from fpx_trace.models.trace import Span, SpanPayload, Trace, is_valid_trace_id

__all__ = [
    "AttributeValue",
    "DoubleValue",
    "IntValue",
    "OtherValue",
    "Span",
    "SpanPayload",
    "StringValue",
    "Trace",
    "TraceConfig",
    "classify",
    "is_valid_trace_id",
    "load_config",
]
