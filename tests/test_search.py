import pytest

from ftkit.search import find_char, memchr, memcmp, rfind_char, strncmp, strnstr


@pytest.mark.parametrize("s, c", [("hello", "l"), ("hello", "h"), ("abcabc", "c"), (b"bytes", "t")])
def test_find_char_finds_first(s, c):
    index = find_char(s, c)
    code = ord(c)
    units = [ord(ch) for ch in s] if isinstance(s, str) else list(s)
    assert units[index] == code
    assert code not in units[:index]


def test_find_char_missing_returns_none():
    assert find_char("hello", "z") is None


def test_find_char_nul_finds_terminator():
    assert find_char("hello", "\0") == len("hello")
    assert find_char("hello", 0) == len("hello")


def test_find_char_stops_at_embedded_nul():
    assert find_char("ab\0cd", "c") is None
    assert find_char("ab\0cd", "\0") == len("ab")


def test_find_char_bytes_wraps_int_target():
    assert find_char(b"xyz", 256 + ord("y")) == b"xyz".index(b"y")


@pytest.mark.parametrize("s, c", [("hello", "l"), ("abcabc", "a"), ("x", "x")])
def test_rfind_char_finds_last(s, c):
    assert rfind_char(s, c) == s.rfind(c)


def test_rfind_char_missing_and_nul():
    assert rfind_char("hello", "q") is None
    assert rfind_char("hello", "\0") == len("hello")


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_zero_count():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_difference_of_first_mismatch():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 3) == ord("c")


def test_strncmp_unsigned_bytes():
    assert strncmp(b"\x80", b"\x01", 1) == 0x80 - 0x01


def test_strncmp_sign_is_antisymmetric():
    assert strncmp("apple", "apricot", 5) == -strncmp("apricot", "apple", 5)


def test_strncmp_negative_count_rejected():
    with pytest.raises(ValueError):
        strncmp("a", "a", -1)


def test_memchr_finds_within_count():
    data = b"abc\0def"
    assert memchr(data, ord("d"), len(data)) == data.index(b"d")
    assert memchr(data, 0, len(data)) == data.index(b"\0")


def test_memchr_respects_count():
    assert memchr(b"abcdef", ord("e"), 3) is None


def test_memchr_wraps_value():
    assert memchr(b"abc", 256 + ord("b"), 3) == b"abc".index(b"b")


def test_memchr_count_beyond_buffer_rejected():
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), 5)


def test_memcmp_results():
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"\x80", b"\x00", 1) == 0x80
    assert memcmp(b"", b"", 0) == 0


def test_memcmp_does_not_stop_at_nul():
    assert memcmp(b"\0a", b"\0b", 2) == ord("a") - ord("b")


def test_memcmp_count_beyond_buffer_rejected():
    with pytest.raises(ValueError):
        memcmp(b"a", b"ab", 2)


def test_strnstr_finds_within_length():
    big = "lorem ipsum dolor sit amet"
    assert strnstr(big, "ipsum", 15) == big.find("ipsum")
    assert strnstr(big, "lorem", len(big)) == big.find("lorem")


def test_strnstr_match_crossing_length_fails():
    big = "lorem ipsum dolor sit amet"
    assert strnstr(big, "ipsum", len("lorem ips")) is None
    assert strnstr(big, "ipsum", len("lorem ipsum")) == big.find("ipsum")


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "d", 3) is None
    assert strnstr("abc", "abcd", 10) is None


def test_strnstr_bytes():
    assert strnstr(b"hello world", b"world", 11) == b"hello world".find(b"world")