from __future__ import annotations

import pytest

from dispim_lib.numbers import parse_core_float, parse_core_int


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        (" -7 ", -7),
        ("+3", 3),
        ("1,024", 1024),
        ("2.9", 2),
        ("-2.9", -2),
    ],
)
def test_parse_core_int(text, expected) -> None:
    assert parse_core_int(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0.25", 0.25),
        (".5", 0.5),
        ("3.", 3.0),
        ("-1,234.5", -1234.5),
    ],
)
def test_parse_core_float(text, expected) -> None:
    assert parse_core_float(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "   ", "Idle", "1,23", "1.2.3", "nan", "inf", None, "12abc"])
def test_parse_rejects_non_numbers(text) -> None:
    with pytest.raises(ValueError):
        parse_core_float(text)
    with pytest.raises(ValueError):
        parse_core_int(text)


def test_parse_with_other_separators() -> None:
    assert parse_core_float("1.234,5", decimal_separator=",", grouping_separator=".") == pytest.approx(1234.5)
    assert parse_core_int("12,9", decimal_separator=",", grouping_separator="") == 12


def test_parse_float_out_of_range() -> None:
    with pytest.raises(ValueError):
        parse_core_float("9" * 400)


def test_same_separators_rejected() -> None:
    with pytest.raises(ValueError):
        parse_core_float("1", decimal_separator=",", grouping_separator=",")


@pytest.mark.parametrize("text", ["1e3", "1.5E-2", "1e9999999", "-2E+5"])
def test_exponent_notation_rejected(text) -> None:
    with pytest.raises(ValueError):
        parse_core_int(text)
    with pytest.raises(ValueError):
        parse_core_float(text)


def test_ungrouped_thousands_before_separator_rejected() -> None:
    with pytest.raises(ValueError):
        parse_core_int("1234,567")
