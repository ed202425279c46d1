"""Tests for optional-number parsing of block attributes."""

import pytest

from packages.shared.ranked_list import parse_count, parse_number


class TestParseNumber:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("9.99", 9.99),
            ("0", 0.0),
            ("-3", -3.0),
            ("+2.5", 2.5),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e2", 100.0),
            ("  4.5 ", 4.5),
            (7, 7.0),
            (4.25, 4.25),
        ],
    )
    def test_numeric(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["", " ", "abc", "12abc", "£10", "0x1A", "nan", "inf", "1_000", "1,5", None, True, [], {}],
    )
    def test_not_numeric(self, raw):
        assert parse_number(raw) is None

    def test_overflow_is_not_numeric(self):
        assert parse_number("1e999") is None
        assert parse_number(10**400) is None


class TestParseCount:
    def test_truncates_toward_zero(self):
        assert parse_count("2.7") == 2
        assert parse_count("-1.5") == -1
        assert parse_count("0.5") == 0

    def test_invalid(self):
        assert parse_count("many") is None
        assert parse_count("") is None
