import pytest

from pushswap.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_clears_prefix_only():
    original = b"I am a student"
    buf = bytearray(original)
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == original[4:]


def test_bzero_zero_count_changes_nothing():
    buf = bytearray(b"abc")
    bzero(buf, 0)
    assert buf == bytearray(b"abc")


def test_bzero_too_many_bytes():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


@pytest.mark.parametrize("nmemb,size", [(3, 4), (1, 1), (10, 7)])
def test_calloc_size_and_zeroes(nmemb, size):
    buf = calloc(nmemb, size)
    assert len(buf) == nmemb * size
    assert not any(buf)


@pytest.mark.parametrize("nmemb,size", [(0, 5), (5, 0), (-2, 3), (0, 0)])
def test_calloc_degenerate_sizes_give_one_byte(nmemb, size):
    assert calloc(nmemb, size) == bytearray(1)


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**40, 2**40)


def test_memchr_finds_first_occurrence():
    data = b"tripouille"
    assert memchr(data, ord("i"), len(data)) == data.index(b"i")


def test_memchr_masks_value_to_byte():
    data = b"tripouille"
    assert memchr(data, ord("t") + 256, len(data)) == 0


def test_memchr_respects_count():
    data = b"abcdef"
    assert memchr(data, ord("e"), 3) is None
    assert memchr(data, ord("e"), 6) == 4


def test_memchr_missing_and_none():
    assert memchr(b"abc", ord("z"), 3) is None
    assert memchr(None, ord("a"), 3) is None


def test_memcmp_unsigned_difference():
    assert memcmp(b"t\x80\0\0\0\0", b"t\0\0\0\0\0", 6) == 128


def test_memcmp_equal_and_antisymmetric():
    a, b = b"hello world", b"hello there"
    assert memcmp(a, a, len(a)) == 0
    assert memcmp(a, b, 6) == 0
    assert memcmp(a, b, len(a)) == -memcmp(b, a, len(a))
    assert memcmp(a, b, len(a)) == a[6] - b[6]


def test_memcmp_count_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_and_returns_dest():
    src = b"I am a student"
    dest = bytearray(len(src))
    result = memcpy(dest, src, len(src))
    assert result is dest
    assert dest == bytearray(src)


def test_memcpy_partial_copy():
    dest = bytearray(b"xxxxxx")
    memcpy(dest, b"abcdef", 3)
    assert dest == bytearray(b"abc") + bytearray(b"xxx")


def test_memcpy_zero_count_and_same_object():
    dest = bytearray(b"keep")
    assert memcpy(dest, b"zzzz", 0) is dest
    assert dest == bytearray(b"keep")
    assert memcpy(dest, dest, 4) is dest
    assert dest == bytearray(b"keep")


def test_memcpy_with_missing_buffer():
    assert memcpy(None, b"abc", 3) is None
    assert memcpy(bytearray(3), None, 3) is None


def test_memmove_forward_overlap():
    original = b"abcdefgh"
    buf = bytearray(original)
    view = memoryview(buf)
    dest = view[2:]
    result = memmove(dest, view, 4)
    assert result is dest
    assert bytes(result) == original[:4] + original[6:]
    assert bytes(buf) == original[:2] + original[:4] + original[6:]


def test_memmove_backward_overlap():
    original = b"abcdefgh"
    buf = bytearray(original)
    view = memoryview(buf)
    result = memmove(view, view[3:], 5)
    assert result is view
    assert bytes(result) == original[3:] + original[5:]
    assert bytes(buf) == original[3:] + original[5:]


def test_memmove_count_too_large():
    with pytest.raises(ValueError):
        memmove(bytearray(2), b"abcd", 4)


def test_memset_fills_prefix():
    original = b" I am a student!@#$"
    buf = bytearray(original)
    result = memset(buf, ord("."), 5)
    assert result is buf
    assert buf[:5] == b"." * 5
    assert buf[5:] == original[5:]


def test_memset_masks_value():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert set(buf) == {0x41}


def test_memset_none_buffer():
    assert memset(None, 1, 3) is None


def test_memset_count_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, 4)