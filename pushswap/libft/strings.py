"""C-style string helpers.

Strings are treated as C strings: a ``"\\0"`` character ends the string
and anything after it is ignored. Positions are returned as indexes
rather than pointers, and ``None`` stands for "not found".
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple, Union

Char = Union[int, str]


def _cstr(s: str) -> str:
    """Return *s* up to its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {s!r}")
    return s.split("\0", 1)[0]


def _char(c: Char) -> str:
    """Reduce *c* to a single character, as a cast to char does for codes."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return chr(c & 0xFF)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(s: str) -> int:
    """Return the number of characters before the terminator."""
    return len(_cstr(s))


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first *c* in *s*; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last *c* in *s*; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of *s* up to its terminator."""
    return _cstr(s)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* characters, terminator included.

    Returns the copied text and the full length of *src*, so a result
    length at or above *size* means the copy was cut short.
    """
    _check_size(size)
    text = _cstr(src)
    copied = text[: size - 1] if size else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns the resulting text and the length the full concatenation
    would have. When *size* is not larger than *dst*, *dst* is left as it
    is and the returned length is ``size + len(src)``.
    """
    _check_size(size)
    head = _cstr(dst)
    tail = _cstr(src)
    if size <= len(head):
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the codes of the first pair that differ,
    or 0 when the compared parts are equal.
    """
    _check_size(n)
    pairs = zip_longest(_cstr(first)[:n], _cstr(second)[:n], fillvalue="\0")
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of *little* within the first *length* characters of *big*, or None.

    An empty *little* is found at index 0.
    """
    _check_size(length)
    needle = _cstr(little)
    if not needle:
        return 0
    index = _cstr(big)[:length].find(needle)
    return None if index < 0 else index