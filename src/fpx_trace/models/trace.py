"""Trace and span models matching the collector's JSON shape.

Pydantic models because both collector responses and the rendered
output are JSON. Field aliases follow the collector's camelCase keys;
unknown fields are kept (extra="allow") so a rendered trace shows
everything the collector sent, minus redacted attributes.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

_TRACE_ID_PATTERN = re.compile(r"[0-9a-fA-F]+")


def is_valid_trace_id(trace_id: str) -> bool:
    """Return True if trace_id is a non-empty hex string. Length is not checked."""
    return _TRACE_ID_PATTERN.fullmatch(trace_id) is not None


class SpanPayload(BaseModel):
    """The OpenTelemetry span body: name, attributes, timing, status, events."""

    model_config = {"extra": "allow"}

    name: str
    attributes: dict[str, Any] = Field(default_factory=dict)


class Span(BaseModel):
    """One recorded operation within a trace."""

    model_config = {"extra": "allow", "populate_by_name": True}

    trace_id: str | None = Field(default=None, alias="traceId")
    span_id: str | None = Field(default=None, alias="spanId")
    parsed_payload: SpanPayload = Field(alias="parsedPayload")

    @property
    def name(self) -> str:
        return self.parsed_payload.name

    @property
    def attributes(self) -> dict[str, Any]:
        return self.parsed_payload.attributes

    def with_attributes(self, attributes: Mapping[str, Any]) -> "Span":
        """Return a copy of this span carrying a new attribute map.

        The receiver is left untouched.
        """
        payload = self.parsed_payload.model_copy(
            update={"attributes": dict(attributes)}
        )
        return self.model_copy(update={"parsed_payload": payload})


class Trace(BaseModel):
    """A trace id and its ordered spans."""

    model_config = {"extra": "allow", "populate_by_name": True}

    trace_id: str = Field(alias="traceId")
    spans: list[Span] = Field(default_factory=list)

    @field_validator("trace_id")
    @classmethod
    def _trace_id_is_hex(cls, value: str) -> str:
        if not is_valid_trace_id(value):
            raise ValueError(f"trace id {value!r} is not a hex identifier")
        return value
