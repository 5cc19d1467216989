"""String building helpers: substrings, joins, trimming, mapping and splitting.

Strings are treated as C strings: a ``"\\0"`` character ends the string
and anything after it is ignored.
"""

from __future__ import annotations

from itertools import islice
from typing import Callable, List, MutableSequence, Optional

from pushswap.libft.strings import _char, _cstr


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at *start*.

    A *start* at or past the end of the string gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character of *s*."""
    pieces = []
    for index, ch in enumerate(_cstr(s)):
        mapped = f(index, ch)
        if not isinstance(mapped, str) or len(mapped) != 1:
            raise ValueError(f"mapping must return a single character, got {mapped!r}")
        pieces.append(mapped)
    return "".join(pieces)


def strjoin(first: str, second: str) -> str:
    """Return *first* followed by *second*."""
    return _cstr(first) + _cstr(second)


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of *s* that appears in *charset*."""
    text = _cstr(s)
    chars = _cstr(charset)
    if not chars:
        return text
    return text.strip(chars)


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``f(index, char)`` for each character of *chars* before its terminator.

    When *f* returns a character, it replaces the one at that index.
    """
    length = next(
        (index for index, ch in enumerate(chars) if ch == "\0"), len(chars)
    )
    for index, ch in enumerate(list(islice(chars, length))):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = _char(replacement)


def split(s: str, separator: str) -> List[str]:
    """Split *s* on a single separator character, dropping empty words."""
    sep = _char(separator)
    text = _cstr(s)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]