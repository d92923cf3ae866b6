import pytest

from ftprintf.textutils import (
    atoi,
    itoa,
    number_length,
    split,
    strmapi,
    strncmp,
    strnstr,
    strtrim,
    substr,
    to_base,
    unsigned_length,
)


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483647, 1000])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r42") == atoi("42")


def test_atoi_skips_leading_zeros():
    assert atoi("0007") == 7


def test_atoi_zeros_before_sign_are_skipped():
    assert atoi("00-3") == -3


def test_atoi_sign_runs():
    assert atoi("--5") == -5
    assert atoi("-+5") == -5
    assert atoi("+-5") == 5


def test_atoi_stops_at_non_digit():
    assert atoi("12abc34") == 12


def test_atoi_empty_and_none():
    assert atoi("") == 0
    assert atoi(None) == 0


def test_atoi_overflow():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483648])
def test_number_length_decimal(n):
    assert number_length(n, 10) == len(str(n))


@pytest.mark.parametrize("n", [0, 255, -255, 4096])
def test_number_length_hex(n):
    text = format(abs(n), "x")
    assert number_length(n, 16) == len(text) + (1 if n < 0 else 0)


def test_unsigned_length_wraps_negative():
    assert unsigned_length(-1, 16) == len(format(2**32 - 1, "x"))
    assert unsigned_length(-1, 10) == len(str(2**32 - 1))


@pytest.mark.parametrize("n", [0, 9, 10, 4294967295])
def test_unsigned_length_decimal(n):
    assert unsigned_length(n, 10) == len(str(n))


@pytest.mark.parametrize("func", [number_length, unsigned_length])
def test_length_rejects_bad_base(func):
    with pytest.raises(ValueError):
        func(5, 1)


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 3735928559])
def test_to_base_hex(n):
    assert to_base(n, "0123456789abcdef") == format(n, "x")
    assert to_base(n, "0123456789ABCDEF") == format(n, "X")


@pytest.mark.parametrize("n", [0, 8, 511])
def test_to_base_octal_and_binary(n):
    assert to_base(n, "01234567") == format(n, "o")
    assert to_base(n, "01") == format(n, "b")


def test_to_base_negative_wraps_to_64_bits():
    assert to_base(-1, "0123456789abcdef") == format(2**64 - 1, "x")


@pytest.mark.parametrize("digits", ["", "0", "aa", "0120", "+01", "01-"])
def test_to_base_rejects_invalid_digits(digits):
    with pytest.raises(ValueError):
        to_base(10, digits)


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_only_separators():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_both_ends():
    assert strtrim("xyhixy", "xy") == "hi"


def test_strtrim_everything():
    assert strtrim("xxx", "x") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim(" a ", "") == " a "


def test_substr_cases():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 10, 2) == ""
    assert substr("hello", 5, 2) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_found_within_length():
    haystack = "hello world"
    assert strnstr(haystack, "world", len(haystack)) == haystack.index("world")


def test_strnstr_match_must_fit_length():
    haystack = "hello world"
    assert strnstr(haystack, "world", len(haystack) - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("", "", 5) == 0


def test_strnstr_missing():
    assert strnstr("abc", "z", 3) is None


def test_strncmp_equal_and_limited():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_none_arguments():
    assert strncmp(None, None, 3) == 0
    assert strncmp(None, "b", 3) == -ord("b")
    assert strncmp("b", None, 3) == ord("b")


def test_strmapi_applies_function():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"


def test_strmapi_passes_index():
    assert strmapi("aaa", lambda i, c: str(i)) == "012"


def test_strmapi_empty():
    assert strmapi("", lambda i, c: c * 2) == ""