import io
import os

import pytest

from ftkit.linereader import LineReader, read_lines


SAMPLE = b"first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_lines_join_back_to_source(size):
    lines = list(read_lines(io.BytesIO(SAMPLE), size))
    assert b"".join(lines) == SAMPLE
    assert lines == SAMPLE.splitlines(keepends=True)


def test_each_line_ends_with_newline_except_last():
    lines = list(read_lines(io.BytesIO(SAMPLE), 4))
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert not lines[-1].endswith(b"\n")


def test_read_line_returns_none_at_end():
    reader = LineReader(io.BytesIO(b"a\nb\n"), 42)
    assert reader.read_line() == b"a\n"
    assert reader.read_line() == b"b\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_source():
    assert LineReader(io.BytesIO(b""), 8).read_line() is None


def test_only_newlines():
    lines = list(read_lines(io.BytesIO(b"\n\n\n"), 2))
    assert lines == [b"\n", b"\n", b"\n"]


def test_text_source():
    text = "alpha\nbeta\ngamma"
    lines = list(read_lines(io.StringIO(text), 3))
    assert lines == text.splitlines(keepends=True)


def test_file_descriptor_source(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(SAMPLE)
    fd = os.open(path, os.O_RDONLY)
    try:
        lines = list(LineReader(fd, 7))
    finally:
        os.close(fd)
    assert lines == SAMPLE.splitlines(keepends=True)


def test_pipe_source():
    read_end, write_end = os.pipe()
    os.write(write_end, b"one\ntwo")
    os.close(write_end)
    try:
        lines = list(read_lines(read_end, 3))
    finally:
        os.close(read_end)
    assert lines == [b"one\n", b"two"]


def test_long_line_with_small_buffer():
    data = b"x" * 500 + b"\n" + b"y" * 10
    lines = list(read_lines(io.BytesIO(data), 1))
    assert [len(line) for line in lines] == [501, 10]


@pytest.mark.parametrize("size", [0, -1, 8192001])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b""), size)


def test_largest_buffer_size_accepted():
    reader = LineReader(io.BytesIO(b"ok\n"), 8192000)
    assert reader.read_line() == b"ok\n"


def test_negative_descriptor():
    with pytest.raises(ValueError):
        LineReader(-1, 42)


class _FailingSource:
    def __init__(self):
        self.calls = 0

    def read(self, n):
        self.calls += 1
        if self.calls == 1:
            return b"partial"
        raise OSError("read failed")


def test_read_error_propagates_and_drops_stash():
    reader = LineReader(_FailingSource(), 42)
    with pytest.raises(OSError):
        reader.read_line()
    with pytest.raises(OSError):
        reader.read_line()
    assert reader.source.calls == 3


def test_reader_continues_after_partial_iteration():
    reader = LineReader(io.BytesIO(b"a\nb\nc\n"), 2)
    assert reader.read_line() == b"a\n"
    assert list(reader) == [b"b\n", b"c\n"]