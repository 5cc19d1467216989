"""Byte-buffer helpers that work on bytes-like objects.

Functions that write change a ``bytearray`` in place. Counts that run
past the end of a buffer raise ``IndexError``, and negative counts or
offsets raise ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

from pushswap.libft.convert import INT_MAX

Buffer = Union[bytes, bytearray, memoryview]
ByteValue = Union[int, str]


def _byte(c: ByteValue) -> int:
    """Reduce *c* to an unsigned byte value, as a cast to unsigned char does."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a byte value, got {c!r}")
    return c & 0xFF


def _check_span(buffer: Buffer, n: int, offset: int = 0) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")
    if offset + n > len(buffer):
        raise IndexError(
            f"span of {n} bytes at offset {offset} exceeds buffer of {len(buffer)} bytes"
        )


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first *n* bytes of *buffer* to zero."""
    _check_span(buffer, n)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Requests larger than the largest 32-bit signed integer raise
    ``MemoryError``.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > INT_MAX:
        raise MemoryError(f"refusing to allocate {total} bytes")
    return bytearray(total)


def memchr(data: Buffer, c: ByteValue, n: int) -> Optional[int]:
    """Return the index of the first byte equal to *c* among the first *n*, or None."""
    _check_span(data, n)
    index = bytes(data[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(first: Buffer, second: Buffer, n: int) -> int:
    """Compare the first *n* bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0
    when the spans are equal.
    """
    _check_span(first, n)
    _check_span(second, n)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* to the start of *dest* and return *dest*."""
    _check_span(dest, n)
    _check_span(src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move *n* bytes inside *dest* from *src_offset* to *dest_offset*.

    The spans may overlap; the result is as if the source bytes were
    copied aside first. Returns *dest*.
    """
    _check_span(dest, n, dest_offset)
    _check_span(dest, n, src_offset)
    if n and dest_offset != src_offset:
        dest[dest_offset : dest_offset + n] = bytes(dest[src_offset : src_offset + n])
    return dest


def memset(buffer: bytearray, c: ByteValue, n: int) -> bytearray:
    """Fill the first *n* bytes of *buffer* with the byte *c* and return *buffer*."""
    _check_span(buffer, n)
    buffer[:n] = bytes([_byte(c)]) * n
    return buffer