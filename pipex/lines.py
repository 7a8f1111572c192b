"""Buffered line-by-line reading from a stream."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Protocol

__all__ = ["LineReader", "DEFAULT_BUFFER_SIZE", "MAX_BUFFER_SIZE"]

DEFAULT_BUFFER_SIZE = 42
MAX_BUFFER_SIZE = 8_000_000


class _Readable(Protocol[AnyStr]):
    def read(self, size: int) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Read lines from a stream in fixed-size chunks.

    Each line keeps its trailing newline; the last line of the stream may
    lack one. Works on binary streams (bytes lines) and text streams
    (str lines) alike.
    """

    def __init__(self, stream: _Readable, buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = min(buffer_size, MAX_BUFFER_SIZE)
        self._rest: AnyStr | None = None
        self._eol: AnyStr | None = None

    def _fill(self) -> None:
        """Read chunks until one holds a newline or the stream is exhausted."""
        while True:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._rest = None
                raise
            if chunk is None:
                return
            if self._eol is None:
                self._eol = "\n" if isinstance(chunk, str) else b"\n"
            if self._rest is None:
                self._rest = chunk[:0]
            self._rest += chunk
            if not chunk or self._eol in chunk:
                return

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once nothing is left to read."""
        self._fill()
        if not self._rest:
            self._rest = None
            return None
        head, sep, tail = self._rest.partition(self._eol)
        self._rest = tail
        return head + sep

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line