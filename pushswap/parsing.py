"""Validation of the numbers given to the sorter."""

from __future__ import annotations

from typing import Iterable, List

from pushswap.libft.chars import is_digit
from pushswap.libft.convert import INT_MAX, INT_MIN, atol


class InputError(ValueError):
    """Raised when the input numbers are malformed, out of range or repeated."""


def is_valid_number(text: str) -> bool:
    """True when *text* is an optional sign followed only by ASCII digits.

    A lone sign is accepted, as the digits after it may be absent.
    """
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    if body is text and not is_digit(text[0]):
        return False
    return all(is_digit(ch) for ch in body)


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Turn the given strings into a list of distinct 32-bit integers.

    Raises ``InputError`` for a malformed number, a value outside the
    32-bit signed range, or a value that appears twice.
    """
    values: List[int] = []
    seen = set()
    for text in args:
        if not is_valid_number(text):
            raise InputError(f"not a number: {text!r}")
        value = atol(text)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"out of range: {text!r}")
        if value in seen:
            raise InputError(f"duplicate value: {text!r}")
        seen.add(value)
        values.append(value)
    return values