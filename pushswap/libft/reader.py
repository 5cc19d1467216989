"""Line-by-line reading from streams and file descriptors."""

from __future__ import annotations

import os
from typing import AnyStr, Dict, Generic, Iterator, Optional, Protocol

BUFFER_SIZE = 1


class _Readable(Protocol[AnyStr]):
    def read(self, size: int) -> AnyStr: ...


class _Descriptor:
    """Minimal readable wrapper around an operating-system file descriptor."""

    def __init__(self, fd: int) -> None:
        self.fd = fd

    def read(self, size: int) -> bytes:
        return os.read(self.fd, size)


class LineReader(Generic[AnyStr]):
    """Read a stream one line at a time, *buffer_size* characters per read.

    Lines keep their trailing newline; the last line may lack one.
    Works with text and binary streams alike.
    """

    def __init__(self, stream: _Readable, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _fill(self) -> None:
        while True:
            if self._pending is not None and self._newline() in self._pending:
                return
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                return
            self._pending = chunk if self._pending is None else self._pending + chunk

    def _newline(self):
        return b"\n" if isinstance(self._pending, (bytes, bytearray)) else "\n"

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        if not self._pending:
            self._pending = None
            return None
        index = self._pending.find(self._newline())
        end = index + 1 if index >= 0 else len(self._pending)
        line, self._pending = self._pending[:end], self._pending[end:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line read from file descriptor *fd*, or None at its end.

    Each descriptor keeps its own unread data between calls, so several
    descriptors can be read in turn.
    """
    if fd < 0:
        raise ValueError(f"file descriptor must not be negative, got {fd}")
    os.read(fd, 0)
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(_Descriptor(fd), BUFFER_SIZE)
    line = reader.read_line()
    if line is None:
        del _readers[fd]
    return line