"""Conversions between decimal text and integers."""

from __future__ import annotations

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _parse(text: str) -> int:
    """Read leading whitespace, an optional sign and as many digits as follow."""
    match = _NUMBER.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit signed value.

    Parsing stops at the first character that is not a digit; text with
    no digits gives 0.
    """
    value = _parse(text) & 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atol(text: str) -> int:
    """Parse a leading decimal integer without any width limit.

    Parsing stops at the first character that is not a digit; text with
    no digits gives 0.
    """
    return _parse(text)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {n!r}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)