"""Conversions between decimal text and integers."""

from __future__ import annotations

import re

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; text with no digits gives 0.
    """
    match = _NUMBER.match(text.lstrip(_WHITESPACE))
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)