"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

BUFFER_SIZE = 1

Data = Union[bytes, str]


def _line_end(data: Data) -> int:
    """Return the index just past the first newline in *data*, or -1."""
    newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
    cut = data.find(newline)
    return -1 if cut < 0 else cut + 1


class LineReader:
    """Read lines from *stream*, pulling *buffer_size* units per read.

    The stream may be binary or text; lines come back in the stream's type
    and keep their trailing newline. A read shorter than *buffer_size*
    ends the current line even without a newline. A non-positive
    *buffer_size* yields no lines.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        self._stream = stream
        self._size = max(buffer_size, 0)
        self._pending: Optional[Data] = None

    def _fill(self) -> None:
        while True:
            pending = self._pending
            if pending is not None and _line_end(pending) >= 0:
                return
            chunk = self._stream.read(self._size)
            if chunk is None:
                chunk = pending[:0] if pending is not None else b""
            self._pending = chunk if pending is None else pending + chunk
            if len(chunk) < self._size:
                return

    def read_line(self) -> Optional[Data]:
        """Return the next line, or ``None`` when nothing is left."""
        if self._size <= 0:
            return None
        try:
            self._fill()
        except OSError:
            self._pending = None
            raise
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        end = _line_end(pending)
        if end < 0:
            end = len(pending)
        line, self._pending = pending[:end], pending[end:]
        return line

    def __iter__(self) -> Iterator[Data]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: Any, buffer_size: int = BUFFER_SIZE) -> Iterator[Data]:
    """Yield the lines of *stream* as :class:`LineReader` reads them."""
    yield from LineReader(stream, buffer_size)