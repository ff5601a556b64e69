"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

__all__ = ["LineReader", "read_lines", "DEFAULT_BUFFER_SIZE"]

DEFAULT_BUFFER_SIZE = 1000


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    The stream is read in chunks of ``buffer_size``. Each line keeps its
    terminating newline; the last line may have none.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer_size must be an int, got {type(buffer_size).__name__}")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None

    def _has_line(self) -> bool:
        return (
            self._pending is not None
            and self._newline is not None
            and self._newline in self._pending
        )

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when the stream has nothing more."""
        while not self._has_line():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"  # type: ignore[assignment]
            self._pending = chunk if self._pending is None else self._pending + chunk
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        end = pending.find(self._newline)  # type: ignore[arg-type]
        if end < 0:
            self._pending = None
            return pending
        self._pending = pending[end + 1:]
        return pending[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``."""
    yield from LineReader(stream, buffer_size)