import pytest

from pushswap.convert import atoi, itoa, split


@pytest.mark.parametrize("value", [0, 1, -1, 42, -42, 2147483647, -2147483648, 987654])
def test_atoi_reads_back_itoa(value):
    assert atoi(itoa(value)) == value


def test_atoi_skips_blanks_and_stops_at_non_digit():
    assert atoi("   -42abc") == -42


def test_atoi_accepts_plus_and_control_blanks():
    assert atoi("\t\n\v\f\r+17") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("--5") == atoi("")


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648


def test_atoi_sign_flips_value():
    assert atoi("-123") == -atoi("123")


def test_itoa_of_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_split_drops_empty_words():
    assert split("  a bb  c ", " ") == ["a", "bb", "c"]


def test_split_of_empty_text_is_empty():
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_of_none_is_none():
    assert split(None, " ") is None


@pytest.mark.parametrize("text", ["1 2 3", "  10   -4 +7  ", "single", "x,,y,z"])
@pytest.mark.parametrize("sep", [" ", ","])
def test_split_words_hold_no_separator(text, sep):
    words = split(text, sep)
    assert all(word and sep not in word for word in words)
    assert "".join(words) == text.replace(sep, "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")