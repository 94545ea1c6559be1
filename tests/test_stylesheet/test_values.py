"""Tests for the typed CSS value tokenizer."""

import pytest

from stylegate.color import ColorValue
from stylegate.stylesheet import (
    Color,
    Composite,
    Function,
    Keyword,
    Length,
    Unparsed,
    parse_value,
)
from stylegate.stylesheet.values import split_top_level


class TestSplitTopLevel:
    def test_whitespace(self):
        assert split_top_level("1px  solid\t#ccc") == ["1px", "solid", "#ccc"]

    def test_parentheses_kept_together(self):
        assert split_top_level("rotate(45deg) translate(1px, 2px)") == ["rotate(45deg)", "translate(1px, 2px)"]

    def test_quotes_kept_together(self):
        assert split_top_level("'Open Sans', serif") == ["'Open Sans',", "serif"]


class TestParseValue:
    def test_length(self):
        assert parse_value("width", "1.5rem") == Length("1.5rem", 1.5, "rem")

    def test_unit_lowercased(self):
        assert parse_value("width", "10PX").unit == "px"

    def test_unitless_number(self):
        value = parse_value("z-index", "-3")
        assert isinstance(value, Length)
        assert value.number == -3.0
        assert value.unit == ""

    def test_keyword(self):
        assert parse_value("display", "Flex") == Keyword("Flex")

    def test_function(self):
        value = parse_value("transform", "rotate(45deg)")
        assert isinstance(value, Function)
        assert value.name == "rotate"
        assert value.args == "45deg"
        assert value.balanced

    def test_unbalanced_function(self):
        value = parse_value("width", "calc(100% - 10px")
        assert isinstance(value, Function)
        assert not value.balanced

    def test_hex_token(self):
        assert parse_value("border-top", "#ccc") == Color("#ccc", ColorValue(204, 204, 204))

    def test_bad_hex_token(self):
        assert isinstance(parse_value("border-top", "#zz"), Unparsed)

    def test_color_property_whole_value(self):
        value = parse_value("background-color", "rgb(0, 0, 0)")
        assert value == Color("rgb(0, 0, 0)", ColorValue(0, 0, 0))

    def test_named_color_only_in_color_property(self):
        assert isinstance(parse_value("color", "red"), Color)
        assert isinstance(parse_value("border-style", "red"), Keyword)

    def test_composite(self):
        value = parse_value("margin", "10px auto")
        assert isinstance(value, Composite)
        assert value.parts == (Length("10px", 10.0, "px"), Keyword("auto"))

    def test_malformed_number(self):
        value = parse_value("width", "1.2.3px")
        assert isinstance(value, Unparsed)
        assert value.looks_numeric

    def test_plain_unparsed(self):
        value = parse_value("content", "'hi'")
        assert isinstance(value, Unparsed)
        assert not value.looks_numeric


class TestLengthToPx:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("12px", 12.0),
            ("9pt", 9 * 1.333),
            ("1rem", 16.0),
            ("0.5em", 8.0),
            ("100%", 16.0),
            ("0", 0.0),
        ],
    )
    def test_convertible(self, raw, expected):
        assert parse_value("font-size", raw).to_px() == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["2vw", "3ch", "12"])
    def test_unconvertible(self, raw):
        assert parse_value("font-size", raw).to_px() is None
