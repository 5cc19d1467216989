"""Formatted output: a small printf and helpers that write to a stream.

Text goes to the given stream, or to standard output when none is
given. The printf conversions are ``%c %s %d %i %x %X %u %p`` and
``%%``. Any other character after ``%`` is consumed and prints nothing.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Optional, TextIO

from pushswap.libft.convert import itoa
from pushswap.libft.strings import _cstr

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {value!r}")
    return value


def _signed32(value: Any) -> int:
    unsigned = _integer(value) & _UINT_MASK
    return unsigned - 2**32 if unsigned >= 2**31 else unsigned


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_integer(value) & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    return _cstr(value)


def _format_signed(value: Any) -> str:
    return str(_signed32(value))


def _format_unsigned(value: Any) -> str:
    return str(_integer(value) & _UINT_MASK)


def _format_hex_lower(value: Any) -> str:
    return format(_integer(value) & _UINT_MASK, "x")


def _format_hex_upper(value: Any) -> str:
    return format(_integer(value) & _UINT_MASK, "X")


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    address &= _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "d": _format_signed,
    "i": _format_signed,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
    "u": _format_unsigned,
    "p": _format_pointer,
}


def format_printf(fmt: Optional[str], *args: Any) -> str:
    """Return *fmt* with its conversions filled in from *args*.

    A ``None`` format gives an empty string. Too few arguments raise
    ``TypeError``; extra arguments are ignored.
    """
    if fmt is None:
        return ""
    values = iter(args)
    chars = iter(_cstr(fmt))
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to *stream* and return the number of characters."""
    text = format_printf(fmt, *args)
    _stream(stream).write(text)
    return len(text)


def put_char(c: Any, stream: Optional[TextIO] = None) -> None:
    """Write one character to *stream*."""
    _stream(stream).write(_format_char(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write *s*, up to its terminator, to *stream*."""
    _stream(stream).write(_cstr(s))


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write *s* followed by a newline; a ``None`` string writes nothing."""
    if s is None:
        return
    out = _stream(stream)
    out.write(_cstr(s))
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal to *stream*."""
    _stream(stream).write(itoa(n))