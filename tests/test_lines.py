import io

import pytest

from pipex.lines import LineReader, read_lines


class _ChunkStream:
    """Returns the given chunks one per read, raising exceptions in place."""

    def __init__(self, chunks):
        self._chunks = list(chunks)

    def read(self, size):
        if not self._chunks:
            return b""
        item = self._chunks.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.mark.parametrize("size", [1, 2, 3, 7, 100])
def test_binary_round_trip(size):
    data = b"first\nsecond line\n\nlast without newline"
    lines = list(read_lines(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])


@pytest.mark.parametrize("size", [1, 4, 42])
def test_text_stream_lines(size):
    data = "a\nbb\nccc\n"
    assert list(read_lines(io.StringIO(data), size)) == ["a\n", "bb\n", "ccc\n"]


def test_line_count_matches_newlines():
    data = b"x\n" * 9
    assert len(list(read_lines(io.BytesIO(data), 5))) == data.count(b"\n")


def test_empty_stream_gives_none_repeatedly():
    reader = LineReader(io.BytesIO(b""))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_none_after_exhaustion():
    reader = LineReader(io.BytesIO(b"only\n"), 3)
    assert reader.read_line() == b"only\n"
    assert reader.read_line() is None


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_buffer_reads_nothing(size):
    stream = io.BytesIO(b"data\n")
    assert LineReader(stream, size).read_line() is None
    assert stream.tell() == 0


def test_short_read_ends_line():
    reader = LineReader(_ChunkStream([b"ab", b"c\nd"]), 4)
    assert reader.read_line() == b"ab"
    assert reader.read_line() == b"c\n"
    assert reader.read_line() == b"d"


def test_read_error_propagates_and_drops_pending():
    stream = _ChunkStream([b"ab", OSError("read failed"), b"cd\n"])
    reader = LineReader(stream, 2)
    with pytest.raises(OSError):
        reader.read_line()
    assert reader.read_line() == b"cd\n"


def test_iterating_reader_matches_read_lines():
    data = b"one\ntwo\nthree"
    assert list(LineReader(io.BytesIO(data), 2)) == list(read_lines(io.BytesIO(data), 2))