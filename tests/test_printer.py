import io
import os

import pytest

from ftkit.printer import format_output, printf


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("hello %s", ("world",)),
        ("%d %i %u", (42, -7, 3000000000)),
        ("[%5d|%-5d|%05d]", (42, 42, -42)),
        ("[%+5d|% d|%.3d]", (42, 42, 7)),
        ("%x %X %#x %#08x", (255, 255, 255, 255)),
        ("%c%3c%-3c|", (65, "z", "q")),
        ("[%.2s|%5.2s|%-6s]", ("hello", "hello", "ab")),
        ("100%%", ()),
        ("no conversions here", ()),
    ],
)
def test_matches_standard_formatting(fmt, args):
    assert format_output(fmt, *args) == fmt % args


def test_null_pointer_prints_nil():
    assert format_output("%p", 0) == "(nil)"


def test_pointer_in_hex():
    assert format_output("%p", 255) == "0xff"


def test_none_string_prints_null():
    assert format_output("%s", None) == "(null)"


def test_unknown_conversion_is_skipped_without_argument():
    assert format_output("a%qb%d", 5) == "ab" + str(5)


def test_format_is_cut_at_nul():
    assert format_output("abc\0%d") == "abc"


def test_surplus_arguments_are_ignored():
    assert format_output("%d", 1, 2, 3) == "1"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_output("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_output(None)


def test_printf_none_format_raises():
    with pytest.raises(TypeError):
        printf(None, file=io.StringIO())


def test_printf_writes_to_stream_and_counts():
    stream = io.StringIO()
    count = printf("%s=%5d", "key", 12, file=stream)
    assert stream.getvalue() == "%s=%5d" % ("key", 12)
    assert count == len(stream.getvalue())


def test_printf_writes_to_descriptor():
    read_end, write_end = os.pipe()
    try:
        count = printf("%s-%d", "ab", 5, file=write_end)
    finally:
        os.close(write_end)
    with os.fdopen(read_end, "rb") as reader:
        data = reader.read()
    assert data == ("%s-%d" % ("ab", 5)).encode()
    assert count == len(data)


def test_printf_defaults_to_stdout(capsys):
    count = printf("%x", 4095)
    out = capsys.readouterr().out
    assert out == "%x" % 4095
    assert count == len(out)


def test_char_nul_is_written():
    assert format_output("a%cb", 0) == "a\0b"