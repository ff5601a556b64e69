import pytest

from fdfkit.textops import (
    atoi,
    itoa,
    split,
    strjoin,
    striteri,
    strmapi,
    strtrim,
    substr,
)


# substr

def test_substr_example():
    assert substr("hello my loco", 2, 5) == "llo m"


def test_substr_start_past_end_is_empty():
    assert substr("hello", 10, 3) == ""


def test_substr_length_clamped_to_end():
    assert substr("tripouille", 0, 42000) == "tripouille"


def test_substr_stops_at_nul():
    assert substr("abc\0def", 0, 10) == "abc"


def test_substr_negative_start_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


# strjoin

def test_strjoin_example():
    assert strjoin("hello", " you") == "hello you"


@pytest.mark.parametrize("a,b", [("", "dolor sit amet"), ("lorem ipsum", ""), ("", "")])
def test_strjoin_with_empty(a, b):
    result = strjoin(a, b)
    assert len(result) == len(a) + len(b)
    assert result.startswith(a) and result.endswith(b)


def test_strjoin_rejects_non_str():
    with pytest.raises(TypeError):
        strjoin("a", 3)


# strtrim

def test_strtrim_example():
    assert strtrim("bedhelbedlobed", "bed") == "helbedlo"


def test_strtrim_everything_trimmed():
    assert strtrim("bedbed", "bed") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  abc  ", "") == "  abc  "


def test_strtrim_ends_not_in_set():
    result = strtrim("v vhellov v", "v v v")
    assert result[0] not in "v " and result[-1] not in "v "
    assert result in "v vhellov v"


# split

def test_split_words():
    words = split("  To  be  or  not  to  be  j  that   is  the  question  ", " ")
    assert len(words) == 11
    assert words[0] == "To"
    assert words[-1] == "question"


def test_split_commas():
    assert split(",,, ,,Hello,there,you,,, ,", ",") == [" ", "Hello", "there", "you", " "]


def test_split_simple():
    assert split("Hello there", " ") == ["Hello", "there"]


def test_split_only_separators_gives_nothing():
    assert split(",,,,", ",") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


# itoa / atoi

@pytest.mark.parametrize("n", [0, 123, -123, -321, -12345, 123456789, -123456789, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("       \t \r -2147fds8483647fds", -2147),
        ("       \t \r 2147483647", 2147483647),
        ("+2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("-0", 0),
        ("       \t \r g -2147fds8483647fds", 0),
        ("       \t \r -+2147fds8483647fds", 0),
        ("       \t \r + 2147fds8483647fds", 0),
        ("0", 0),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


# strmapi / striteri

def test_strmapi_upper():
    assert strmapi("hello", lambda i, c: chr(ord(c) - 32)) == "HELLO"


def test_strmapi_receives_indices():
    seen = []
    strmapi("abc", lambda i, c: seen.append(i) or c)
    assert seen == [0, 1, 2]


def test_striteri_modifies_in_place():
    chars = list("hello")
    striteri(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert "".join(chars) == "HeLlO"


def test_striteri_stops_at_nul():
    chars = list("ab\0cd")
    striteri(chars, lambda i, c: "x")
    assert chars == ["x", "x", "\0", "c", "d"]