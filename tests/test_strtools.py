import pytest

from pushswap.strtools import (
    atoi,
    count_words,
    itoa,
    split,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -123abc", -123),
        ("+99", 99),
        ("words 56", 0),
        ("+-420", 0),
        ("-+420", 0),
        ("", 0),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_int_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 7, -7, 123456, 2147483647, -2147483648])
def test_itoa_round_trips_through_atoi(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize(
    "text",
    ["This is a test!", "This    is a test!", "   This is a test!", "This is a test!   "],
)
def test_count_words(text):
    assert count_words(text, " ") == 4


def test_split_trailing_spaces():
    assert split("This is a test!   ", " ") == ["This", "is", "a", "test!"]


def test_split_only_separators():
    assert split("   ", " ") == []


def test_split_spaces_everywhere():
    assert split(" spa ces every where   ", " ") == ["spa", "ces", "every", "where"]


def test_split_newline():
    assert split("split\nthis\nby\nnewline", "\n") == ["split", "this", "by", "newline"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_split_count_matches_count_words():
    text = "  one two   three "
    assert len(split(text, " ")) == count_words(text, " ")


def _even_to_upper(i, c):
    return c.upper() if i % 2 == 0 and c.isalpha() else c


def test_striteri_list_in_place():
    chars = list("abcd")
    result = striteri(chars, _even_to_upper)
    assert result is chars
    assert chars == ["A", "b", "C", "d"]


def test_striteri_empty():
    assert striteri([], _even_to_upper) == []


def test_striteri_string_matches_strmapi():
    text = "eyo, this is a test."
    assert striteri(text, _even_to_upper) == strmapi(text, _even_to_upper)


def test_strmapi_identity_keeps_text():
    assert strmapi("safe", lambda i, c: c) == "safe"


def test_strmapi_uses_index():
    assert strmapi("aaa", lambda i, c: str(i)) == "012"


def test_strjoin():
    assert strjoin("Hello, ", "World!") == "Hello, World!"
    assert strjoin("", "") == ""


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  a ", "") == "  a "


@pytest.mark.parametrize(
    "text, start, length, expected",
    [
        ("Hello, World!", 7, 5, "World"),
        ("Hello, World!", 0, 5, "Hello"),
        ("Hello", 5, 3, ""),
        ("Hello", 10, 3, ""),
        ("42", 1, 10, "2"),
        ("42", 0, 0, ""),
    ],
)
def test_substr_cases(text, start, length, expected):
    assert substr(text, start, length) == expected


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("Hello", -1, 2)