"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional

BUFFER_SIZE = 50


class LineReader:
    """Read lines, newline included, from a text or binary stream.

    Data is read in chunks of ``buffer_size``; what follows a returned
    line is kept for the next call.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    @staticmethod
    def _newline(data) -> AnyStr:
        return "\n" if isinstance(data, str) else b"\n"

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, with its newline if it has one.

        Returns None once the stream is exhausted and nothing is pending.
        """
        while self._pending is None or self._newline(self._pending) not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if not self._pending:
            self._pending = None
            return None
        index = self._pending.find(self._newline(self._pending))
        if index < 0:
            line, self._pending = self._pending, None
        else:
            line = self._pending[: index + 1]
            self._pending = self._pending[index + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line

    def discard(self) -> None:
        """Drop any data read but not yet returned."""
        self._pending = None