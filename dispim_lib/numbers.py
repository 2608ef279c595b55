"""
dispim_lib/numbers.py

Parsing of numeric property strings returned by the device core.

Core strings are formatted with a fixed locale (US by default): "." as the
decimal separator and "," grouping thousands. Integer parsing accepts a
decimal string and truncates toward zero, matching how the core's number
formatter reads "2.5" as 2.

The formatter is stricter than the core's own: grouping separators must
split the whole part into groups of three ("1,234,567", not "1234,567"),
and exponent notation is not accepted.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import Optional

DEFAULT_DECIMAL_SEPARATOR = "."
DEFAULT_GROUPING_SEPARATOR = ","


@lru_cache(maxsize=8)
def _number_pattern(decimal_separator: str, grouping_separator: str) -> re.Pattern[str]:
    if not decimal_separator:
        raise ValueError("decimal_separator must not be empty")
    if decimal_separator == grouping_separator:
        raise ValueError("decimal_separator and grouping_separator must differ")
    dec = re.escape(decimal_separator)
    if grouping_separator:
        grp = re.escape(grouping_separator)
        whole = rf"\d{{1,3}}(?:{grp}\d{{3}})+|\d+"
    else:
        whole = r"\d+"
    return re.compile(
        rf"^(?P<sign>[+-]?)"
        rf"(?:(?P<whole>{whole})(?:{dec}(?P<frac>\d*))?|{dec}(?P<lead_frac>\d+))"
        r"$"
    )


def _to_decimal(
    text: Optional[str],
    decimal_separator: str,
    grouping_separator: str,
) -> Decimal:
    if text is None:
        raise ValueError("cannot parse a number from None")
    stripped = text.strip()
    if not stripped:
        raise ValueError("cannot parse a number from an empty string")
    match = _number_pattern(decimal_separator, grouping_separator).match(stripped)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    whole = match.group("whole") or "0"
    if grouping_separator:
        whole = whole.replace(grouping_separator, "")
    frac = match.group("frac") or match.group("lead_frac") or "0"
    canonical = f"{match.group('sign')}{whole}.{frac}"
    try:
        return Decimal(canonical)
    except InvalidOperation as exc:  # pragma: no cover - the pattern only admits valid literals
        raise ValueError(f"not a number: {text!r}") from exc


def parse_core_float(
    text: Optional[str],
    *,
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR,
    grouping_separator: str = DEFAULT_GROUPING_SEPARATOR,
) -> float:
    """Parse a core property string as a float. Raises ValueError on bad input."""
    value = float(_to_decimal(text, decimal_separator, grouping_separator))
    if math.isinf(value):
        raise ValueError(f"number out of range: {text!r}")
    return value


def parse_core_int(
    text: Optional[str],
    *,
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR,
    grouping_separator: str = DEFAULT_GROUPING_SEPARATOR,
) -> int:
    """Parse a core property string as an int, truncating any fraction."""
    return int(_to_decimal(text, decimal_separator, grouping_separator))


__all__ = ["parse_core_float", "parse_core_int"]
