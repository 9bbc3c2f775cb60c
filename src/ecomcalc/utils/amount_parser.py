"""Amount parsing utilities.

Import files come from spreadsheet exports that mix decimal separators and
occasionally carry junk after a number. Parsing is lenient: the leading
numeric part of a field is used and anything unreadable becomes zero.
"""

import math
import re

_INTEGER_PREFIX = re.compile(r"^\s*([+-]?\d+)", re.ASCII)
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def parse_count(count_str: str) -> int:
    """Parse an order count.

    Handles:
    - "15"
    - " 15 " (surrounding whitespace)
    - "15.7" (fractional part dropped, 15)
    - "12 orders" (trailing text ignored, 12)

    Args:
        count_str: Count string

    Returns:
        Integer count, or 0 if the string has no leading integer
    """
    match = _INTEGER_PREFIX.match(count_str or "")
    if match is None:
        return 0
    return int(match.group(1))


def parse_amount(amount_str: str) -> float:
    """Parse a monetary amount.

    Handles:
    - "1878.79"
    - "1878,79" (comma decimal separator)
    - "1e3"
    - "12.50 RON" (trailing text ignored)

    Only the first comma is treated as a decimal separator, so "1.234,56"
    reads as 1.234 the way a spreadsheet export would be misread by hand.

    Args:
        amount_str: Amount string

    Returns:
        Float amount, or 0.0 if the string has no leading number
    """
    amount_str = (amount_str or "").replace(",", ".", 1)
    match = _FLOAT_PREFIX.match(amount_str)
    if match is None:
        return 0.0
    amount = float(match.group(1))
    if not math.isfinite(amount):
        return 0.0
    return amount


def coerce_non_negative(value: object) -> float:
    """Coerce a form entry to a non-negative number.

    Non-numeric, NaN, infinite and negative values become 0.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number
