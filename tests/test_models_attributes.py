"""Tests for attribute value classification and display helpers."""

import pytest

from fpx_trace.models.attributes import (
    DoubleValue,
    IntValue,
    OtherValue,
    StringValue,
    attribute_text,
    classify,
    display_status,
    get_attribute,
    to_raw,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("GET", StringValue("GET")),
        (200, IntValue(200)),
        (12.5, DoubleValue(12.5)),
        (None, OtherValue(None)),
        (True, OtherValue(True)),
        ([1, 2], OtherValue([1, 2])),
        ({"a": 1}, OtherValue({"a": 1})),
    ],
)
def test_classify(raw, expected):
    """Raw JSON values map to exactly one variant."""
    assert classify(raw) == expected


def test_bool_is_not_an_int():
    """Booleans are OtherValue, not IntValue, despite bool subclassing int."""
    assert isinstance(classify(False), OtherValue)


def test_to_raw_unwraps_each_variant():
    """to_raw returns the payload for every variant."""
    assert to_raw(StringValue("x")) == "x"
    assert to_raw(IntValue(3)) == 3
    assert to_raw(DoubleValue(1.5)) == 1.5
    assert to_raw(OtherValue(None)) is None


def test_to_raw_rejects_non_variant():
    """Passing something that is not a variant is a programming error."""
    with pytest.raises(TypeError):
        to_raw("plain string")  # type: ignore[arg-type]


def test_get_attribute_absent_vs_null():
    """A missing key returns None; a null value returns OtherValue(None)."""
    attributes = {"present": None}
    assert get_attribute(attributes, "missing") is None
    assert get_attribute(attributes, "present") == OtherValue(None)


def test_attribute_text_only_for_strings():
    """attribute_text yields text only for StringValue."""
    assert attribute_text(StringValue("POST")) == "POST"
    assert attribute_text(IntValue(1)) is None
    assert attribute_text(OtherValue(None)) is None
    assert attribute_text(None) is None


class TestDisplayStatus:
    """Status codes render the same whatever wire type they arrive as."""

    def test_string_and_int_match(self):
        assert display_status(classify("200")) == display_status(classify(200)) == "200"

    def test_integral_double(self):
        assert display_status(classify(404.0)) == "404"

    def test_fractional_double(self):
        assert display_status(classify(200.5)) == "200.5"

    def test_other_and_missing(self):
        assert display_status(classify(None)) is None
        assert display_status(classify(True)) is None
        assert display_status(None) is None
