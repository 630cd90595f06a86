"""
Tests for grammar.py - Field parsers
"""

import pytest

from imap_datetime.errors import (
    MalformedDate,
    InvalidMonthName,
    MissingDateTimeSeparator,
    MissingTimeZone,
    MalformedTimeZone,
    TrailingCharacters,
)
from imap_datetime.grammar import (
    FieldFailure,
    FieldMatch,
    parse_date,
    parse_date_time,
    parse_day,
    parse_month,
    parse_time,
    parse_zone,
    parse_zone_separator,
    parse_end,
)


class TestParseDay:
    """Tests for parse_day."""

    def test_space_padded(self):
        assert parse_day(" 1-Jul", 0) == FieldMatch(1, 2)

    def test_two_digits(self):
        assert parse_day("25-Dec", 0) == FieldMatch(25, 2)

    def test_zero_padded(self):
        assert parse_day("01-Jul", 0) == FieldMatch(1, 2)

    def test_single_digit_before_dash(self):
        """Test that a bare digit is accepted when the dash follows it."""
        assert parse_day("1-Jul", 0) == FieldMatch(1, 1)

    @pytest.mark.parametrize("text", ["", "x1-Jul", "  1-Jul", "1", "١٢-Jul"])
    def test_malformed(self, text):
        assert parse_day(text, 0) == FieldFailure(MalformedDate, 0)


class TestParseMonth:
    """Tests for parse_month."""

    def test_canonical(self):
        assert parse_month("1-Jul-2002", 2) == FieldMatch(7, 5)

    def test_wrong_case_is_invalid_month(self):
        assert parse_month("JUL", 0) == FieldFailure(InvalidMonthName, 0)

    def test_unknown_name_is_invalid_month(self):
        assert parse_month("Foo", 0) == FieldFailure(InvalidMonthName, 0)

    def test_short_field_is_malformed_date(self):
        assert parse_month("Ju-2002", 0) == FieldFailure(MalformedDate, 0)


class TestParseZone:
    """Tests for parse_zone."""

    def test_positive(self):
        assert parse_zone("+0200", 0) == FieldMatch(120, 5)

    def test_negative(self):
        assert parse_zone("-0530", 0) == FieldMatch(-330, 5)

    def test_zero(self):
        assert parse_zone("+0000", 0) == FieldMatch(0, 5)

    def test_missing_sign(self):
        assert parse_zone("0200", 0) == FieldFailure(MissingTimeZone, 0)

    def test_empty(self):
        assert parse_zone("", 0) == FieldFailure(MissingTimeZone, 0)

    @pytest.mark.parametrize("text", ["+02", "+02:00", "+abcd", "+0060", "+2400", "+9999"])
    def test_malformed(self, text):
        assert parse_zone(text, 0) == FieldFailure(MalformedTimeZone, 1)

    def test_largest_offset(self):
        assert parse_zone("-2359", 0) == FieldMatch(-(23 * 60 + 59), 5)


class TestComposedParsers:
    """Tests for the composed date, time and date-time parsers."""

    def test_parse_date_drops_literals(self):
        assert parse_date(" 1-Jul-2002", 0) == FieldMatch((1, 7, 2002), 11)

    def test_parse_time(self):
        assert parse_time("13:50:05", 0) == FieldMatch((13, 50, 5), 8)

    def test_parse_date_time(self):
        result = parse_date_time(" 1-Jul-2002 13:50:05 +0200", 0)
        assert result == FieldMatch(((1, 7, 2002), (13, 50, 5), 120), 26)

    def test_failure_position(self):
        """Test the failure reports where the bad field starts."""
        result = parse_date_time(" 1-Jul-2002 13:50:05 +0200x", 0)
        assert result == FieldFailure(TrailingCharacters, 26)

    def test_input_untouched(self):
        """Test that parsers leave the input string unchanged."""
        text = "25-Dec-2020 00:00:00 -0500"
        parse_date_time(text, 0)
        assert text == "25-Dec-2020 00:00:00 -0500"


class TestSeparators:
    """Tests for the zone separator and end-of-input parsers."""

    def test_zone_separator_at_end_is_missing_zone(self):
        assert parse_zone_separator("13:50:05", 8) == FieldFailure(MissingTimeZone, 8)

    def test_zone_separator_wrong_char(self):
        assert parse_zone_separator("13:50:05\t+0200", 8) == FieldFailure(MissingDateTimeSeparator, 8)

    def test_end(self):
        assert parse_end("abc", 3) == FieldMatch(None, 3)
        assert parse_end("abc", 2) == FieldFailure(TrailingCharacters, 2)
