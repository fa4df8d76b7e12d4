"""Span attribute keys and the typed attribute value variant.

Attribute maps arrive from the collector as raw JSON values. Read sites
never inspect those values directly: they go through classify(), which
turns a raw value into exactly one of StringValue, IntValue, DoubleValue
or OtherValue, and then branch on that variant.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

# Keys emitted by the Fiberplane Studio collector. These must stay in
# sync with the collector's schema.
HTTP_REQUEST_METHOD = "http.request.method"
FPX_HTTP_REQUEST_PATHNAME = "fpx.http.request.pathname"
HTTP_RESPONSE_STATUS_CODE = "http.response.status_code"
FPX_HTTP_REQUEST_ENV = "fpx.http.request.env"
HTTP_AUTHORIZATION = "http.request.header.authorization"
HTTP_NEON_CONNECTION_STRING = "http.request.header.neon-connection-string"


@dataclass(frozen=True)
class StringValue:
    value: str


@dataclass(frozen=True)
class IntValue:
    value: int


@dataclass(frozen=True)
class DoubleValue:
    value: float


@dataclass(frozen=True)
class OtherValue:
    """Any JSON value that is not a string or number (null, bool, list, object)."""

    value: Any


AttributeValue = Union[StringValue, IntValue, DoubleValue, OtherValue]


def classify(raw: Any) -> AttributeValue:
    """Wrap a raw JSON attribute value in its variant.

    Booleans are OtherValue even though bool subclasses int.
    """
    if isinstance(raw, bool):
        return OtherValue(raw)
    if isinstance(raw, str):
        return StringValue(raw)
    if isinstance(raw, int):
        return IntValue(raw)
    if isinstance(raw, float):
        return DoubleValue(raw)
    return OtherValue(raw)


def to_raw(value: AttributeValue) -> Any:
    """Unwrap a variant back into the JSON value stored on the span."""
    if isinstance(value, (StringValue, IntValue, DoubleValue, OtherValue)):
        return value.value
    raise TypeError(f"Unsupported attribute value: {value!r}")


def get_attribute(attributes: Mapping[str, Any], key: str) -> AttributeValue | None:
    """Look up key and classify it. Returns None if the key is absent."""
    if key not in attributes:
        return None
    return classify(attributes[key])


def attribute_text(value: AttributeValue | None) -> str | None:
    """Return the string payload of a StringValue, else None."""
    if value is None:
        return None
    if isinstance(value, StringValue):
        return value.value
    if isinstance(value, (IntValue, DoubleValue, OtherValue)):
        return None
    raise TypeError(f"Unsupported attribute value: {value!r}")


def display_status(value: AttributeValue | None) -> str | None:
    """Render a status code attribute for display.

    "200", 200 and 200.0 all render as "200". Non-numeric variants
    return None so callers can substitute a placeholder.
    """
    if value is None:
        return None
    if isinstance(value, StringValue):
        return value.value
    if isinstance(value, IntValue):
        return str(value.value)
    if isinstance(value, DoubleValue):
        if value.value.is_integer():
            return str(int(value.value))
        return str(value.value)
    if isinstance(value, OtherValue):
        return None
    raise TypeError(f"Unsupported attribute value: {value!r}")
