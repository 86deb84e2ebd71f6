"""Buffered line reading from a stream."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream in fixed-size chunks.

    Each line keeps its trailing newline; the last line of a stream may lack
    one. Once the stream is exhausted, ``read_line`` returns None.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._size = buffer_size
        self._buffer: Optional[AnyStr] = None
        self._eof = False

    def _fill(self) -> None:
        chunk = self._stream.read(self._size)
        if not chunk:
            self._eof = True
            if self._buffer is None:
                self._buffer = chunk
        else:
            self._buffer = chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when nothing is left to read."""
        parts: list[AnyStr] = []
        if self._buffer is None and not self._eof:
            self._fill()
        while True:
            buffer = self._buffer
            if buffer:
                newline = "\n" if isinstance(buffer, str) else b"\n"
                index = buffer.find(newline)
                if index >= 0:
                    parts.append(buffer[: index + 1])
                    self._buffer = buffer[index + 1 :]
                    return parts[0][:0].join(parts)
                parts.append(buffer)
                self._buffer = buffer[:0]
            if self._eof:
                return parts[0][:0].join(parts) if parts else None
            self._fill()

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line