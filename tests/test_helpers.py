# -*- coding: utf-8 -*-
"""
Tests for input parsing helpers.
"""

from decimal import Decimal

import pytest

from utils.helpers import format_price, parse_bool, parse_decimal, parse_int, parse_tags, truncate_text


@pytest.mark.parametrize("value, expected", [
    ("12.5", Decimal("12.5")),
    (" 3 ", Decimal("3")),
    (4, Decimal("4")),
    (2.5, Decimal("2.5")),
    ("", Decimal("0")),
    ("abc", Decimal("0")),
    (None, Decimal("0")),
    (True, Decimal("0")),
    ("NaN", Decimal("0")),
    ("inf", Decimal("0")),
    ("-1", Decimal("-1")),
])
def test_parse_decimal(value, expected):
    assert parse_decimal(value) == expected


@pytest.mark.parametrize("value, expected", [
    ("30", 30),
    ("7.9", 7),
    (12, 12),
    ("", 0),
    ("many", 0),
    (None, 0),
])
def test_parse_int(value, expected):
    assert parse_int(value) == expected


def test_parse_tags():
    assert parse_tags("a, b,,c ") == ["a", "b", "c"]
    assert parse_tags(["x", " ", "y "]) == ["x", "y"]
    assert parse_tags(None) == []


def test_format_price():
    assert format_price(Decimal("12.5")) == "12.50"
    assert format_price(None) == ""


def test_truncate_text():
    assert truncate_text("short") == "short"
    assert truncate_text("x" * 60, 10) == "xxxxxxx..."


@pytest.mark.parametrize("value, expected", [
    (True, True),
    (False, False),
    ("false", False),
    ("No", False),
    ("", False),
    (" yes ", True),
    ("1", True),
    (0, False),
    (None, False),
])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_parse_bool_rejects_unknown_text():
    with pytest.raises(ValueError):
        parse_bool("maybe")
