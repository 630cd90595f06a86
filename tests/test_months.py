"""
Tests for months.py - Month abbreviation table
"""

import pytest

from imap_datetime.months import (
    MONTH_ABBREVIATIONS,
    MONTH_NUMBERS,
    month_abbreviation,
    month_number,
)


class TestMonthNumber:
    """Tests for month_number function."""

    def test_all_canonical_names(self):
        """Test every canonical abbreviation maps to its month."""
        for expected, name in enumerate(MONTH_ABBREVIATIONS, start=1):
            assert month_number(name) == expected

    def test_case_sensitive(self):
        """Test that upper and lower case spellings are rejected."""
        assert month_number("JUL") is None
        assert month_number("jul") is None
        assert month_number("jUl") is None

    def test_unknown_names(self):
        """Test that full names and junk are rejected."""
        assert month_number("July") is None
        assert month_number("Foo") is None
        assert month_number("") is None


class TestMonthAbbreviation:
    """Tests for month_abbreviation function."""

    def test_known_months(self):
        assert month_abbreviation(1) == "Jan"
        assert month_abbreviation(7) == "Jul"
        assert month_abbreviation(12) == "Dec"

    @pytest.mark.parametrize("number", [0, 13, -1])
    def test_out_of_range(self, number):
        """Test that numbers outside 1-12 raise ValueError."""
        with pytest.raises(ValueError):
            month_abbreviation(number)


class TestMonthTable:
    """Tests for the shared table itself."""

    def test_table_is_read_only(self):
        """Test that the mapping cannot be modified."""
        with pytest.raises(TypeError):
            MONTH_NUMBERS["Foo"] = 13

    def test_twelve_months(self):
        assert len(MONTH_ABBREVIATIONS) == 12
        assert len(MONTH_NUMBERS) == 12
