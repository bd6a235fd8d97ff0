"""Tests for monetary amount parsing."""

import math

import pytest

from receipt_points.utils.amounts import parse_amount


class TestParseAmount:
    """Test suite for parse_amount."""

    @pytest.mark.parametrize("text,expected", [
        ("9.00", 9.0),
        ("35.35", 35.35),
        ("0", 0.0),
        ("-1.50", -1.5),
        ("+2.25", 2.25),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
    ])
    def test_decimal_amounts(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", [
        "",
        "abc",
        "$5.00",
        "5,00",
        " 9.00",
        "9.00 ",
        "1_000.00",
        "1.2.3",
        "e5",
        ".",
        "٣.٠٠",
    ])
    def test_rejected_amounts(self, text):
        assert parse_amount(text) is None

    def test_overflow_is_rejected(self):
        assert parse_amount("1e400") is None

    @pytest.mark.parametrize("text,expected", [
        ("0x1p-2", 0.25),
        ("0X1.8P1", 3.0),
        ("-0x.8p0", -0.5),
        ("0x24p0", 36.0),
    ])
    def test_hex_amounts(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["0x1", "0x1.8", "0xp1", "0x1p", "0x1p+-2", " 0x1p0"])
    def test_hex_amounts_need_a_binary_exponent(self, text):
        assert parse_amount(text) is None

    def test_hex_overflow_is_rejected(self):
        assert parse_amount("0x1p2000") is None

    def test_explicit_infinity_and_nan(self):
        assert parse_amount("inf") == math.inf
        assert parse_amount("-Infinity") == -math.inf
        assert math.isnan(parse_amount("NaN"))
