"""Unit tests for svg2cetz.svg.style and svg2cetz.units."""

import logging

import pytest

from svg2cetz.exceptions import MalformedNumeric, MalformedStyleSyntax
from svg2cetz.svg.style import Style, format_fill, format_stroke
from svg2cetz.units import parse_number, parse_number_list, split_numbers


class TestStyleParse:
    """Tests for Style.parse."""

    def test_empty_string_is_all_absent(self) -> None:
        """An empty style parses to a record with every field absent."""
        style = Style.parse("")
        assert style == Style()
        assert style.is_empty

    def test_trailing_semicolon_is_ignored(self) -> None:
        """A stray trailing semicolon does not raise."""
        assert Style.parse("fill:red;") == Style(fill="red")
        assert Style.parse(";") == Style()

    def test_all_known_keys(self) -> None:
        """Every recognized key lands in its field."""
        style = Style.parse(
            "fill:#ff0000;fill-rule:evenodd;stroke:#000000;stroke-width:0.5px;"
            "stroke-dasharray:4,2;font-family:'DejaVu Sans';font-size:12px"
        )
        assert style == Style(
            fill="#ff0000",
            fill_rule="evenodd",
            stroke="#000000",
            stroke_width=0.5,
            dash_array="4,2",
            font_family="'DejaVu Sans'",
            font_size=12.0,
        )

    def test_whitespace_around_keys_and_values(self) -> None:
        """Spaces around keys and values are trimmed."""
        assert Style.parse(" fill : blue ; stroke-width : 2 ") == Style(fill="blue", stroke_width=2.0)

    def test_unknown_keys_are_logged_not_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown keys are ignored with a debug log line."""
        with caplog.at_level(logging.DEBUG, logger="svg2cetz"):
            style = Style.parse("opacity:0.5;fill:red")
        assert style == Style(fill="red")
        assert "opacity" in caplog.text

    def test_missing_colon_raises(self) -> None:
        """A non-empty segment without a colon is malformed."""
        with pytest.raises(MalformedStyleSyntax) as exc_info:
            Style.parse("fill:red;stroke")
        assert exc_info.value.segment == "stroke"

    def test_bad_number_raises(self) -> None:
        """Numeric fields reject non-numeric values."""
        with pytest.raises(MalformedNumeric):
            Style.parse("stroke-width:thick")
        with pytest.raises(MalformedNumeric):
            Style.parse("font-size:12em")

    def test_point_suffix_is_stripped(self) -> None:
        """A pt suffix is accepted like px."""
        assert Style.parse("font-size:9pt").font_size == 9.0

    def test_parse_is_idempotent_on_canonical_text(self) -> None:
        """Parsing the same canonical text twice gives equal records."""
        text = "fill:#00ff00;stroke:#000000;stroke-width:1"
        assert Style.parse(text) == Style.parse(text)

    def test_value_may_contain_colon(self) -> None:
        """Only the first colon separates key and value."""
        assert Style.parse("fill:url(data:x)").fill == "url(data:x)"

    def test_none_is_distinct_from_absent(self) -> None:
        """fill:none is specified, unlike a missing fill."""
        style = Style.parse("fill:none")
        assert style.fill == "none"
        assert not style.has_fill
        assert not style.is_empty


class TestFormatting:
    """Tests for fill and stroke descriptors."""

    def test_fill_absent_emits_nothing(self) -> None:
        """No fill means no fill argument."""
        assert format_fill(Style()) == ""

    def test_fill_present(self) -> None:
        """A fill is emitted verbatim, including none."""
        assert format_fill(Style(fill="#123456")) == "fill: #123456, "
        assert format_fill(Style(fill="none")) == "fill: none, "

    def test_stroke_none_marker(self) -> None:
        """Without paint, thickness or dash the stroke is explicitly none."""
        assert format_stroke(Style()) == "stroke: none, "
        assert format_stroke(Style(fill="red")) == "stroke: none, "

    def test_stroke_all_subfields(self) -> None:
        """Paint, thickness and dash flag are combined in order."""
        style = Style(stroke="#000", stroke_width=1.5, dash_array="4 2")
        assert format_stroke(style) == 'stroke: (paint: #000, thickness: 1.5pt, dash: "dashed", ), '

    def test_stroke_thickness_only(self) -> None:
        """Only the present subfields are written."""
        assert format_stroke(Style(stroke_width=2.0)) == "stroke: (thickness: 2pt, ), "

    def test_dash_presence_only(self) -> None:
        """The dash pattern itself is not preserved."""
        assert format_stroke(Style(dash_array="1,1,5")) == 'stroke: (dash: "dashed", ), '


class TestUnits:
    """Tests for numeric attribute parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("12", 12.0), ("12px", 12.0), ("12pt", 12.0), (" -3.5 ", -3.5), ("1e2", 100.0)],
    )
    def test_parse_number(self, value: str, expected: float) -> None:
        """Plain numbers and px/pt suffixed numbers parse."""
        assert parse_number(value) == expected

    @pytest.mark.parametrize("value", ["", "px", "12em", "abc", "1.2.3"])
    def test_parse_number_rejects(self, value: str) -> None:
        """Non-numeric text raises MalformedNumeric."""
        with pytest.raises(MalformedNumeric):
            parse_number(value, "x")

    def test_parse_number_list(self) -> None:
        """Lists split on whitespace and commas; empty text is an empty list."""
        assert parse_number_list("0 10  20") == [0.0, 10.0, 20.0]
        assert parse_number_list("1,2, 3px") == [1.0, 2.0, 3.0]
        assert parse_number_list("") == []
        assert parse_number_list("   ") == []

    def test_parse_number_list_compact(self) -> None:
        """Items may run together when the next one starts with a sign or dot."""
        assert parse_number_list("1-2+3") == [1.0, -2.0, 3.0]
        assert parse_number_list(".5.5") == [0.5, 0.5]
        assert parse_number_list("10px-5pt") == [10.0, -5.0]

    @pytest.mark.parametrize("value", ["1 2x", "a", "1,,2", "3 em"])
    def test_parse_number_list_rejects(self, value: str) -> None:
        """Anything besides numbers, units and separators raises MalformedNumeric."""
        with pytest.raises(MalformedNumeric):
            parse_number_list(value, "x")

    def test_split_numbers(self) -> None:
        """split_numbers keeps each item's text."""
        assert split_numbers(" 1, -2.5e3 .5") == ["1", "-2.5e3", ".5"]
        with pytest.raises(ValueError):
            split_numbers("1px")
