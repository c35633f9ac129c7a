import pytest

from pushswap import strings


@pytest.mark.parametrize("text", ["0", "42", "-7", "2147483647", "-2147483648"])
def test_atoi_itoa_round_trip(text):
    assert strings.itoa(strings.atoi(text)) == text


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert strings.atoi(" \t\n-42abc") == -42
    assert strings.atoi("+15x") == 15


def test_atoi_without_digits_is_zero():
    assert strings.atoi("abc") == 0
    assert strings.atoi("--5") == 0


def test_atoi_wraps_beyond_int_range():
    assert strings.atoi("2147483648") == strings.INT_MIN
    assert strings.itoa(strings.atoi("2147483648")) != "2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        strings.itoa(strings.INT_MAX + 1)


def test_split_drops_empty_words():
    assert strings.split("  1 2   3 ", " ") == ["1", "2", "3"]
    assert strings.split("   ", " ") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        strings.split("a b", "ab")


def test_split_join_invariant():
    words = strings.split("ra rb  rr", " ")
    assert " ".join(words) == "ra rb rr"


def test_strchr_and_strrchr():
    text = "abcabc"
    assert strings.strchr(text, "b") == text.index("b")
    assert strings.strrchr(text, "b") == text.rindex("b")
    assert strings.strchr(text, "z") is None
    assert strings.strrchr(text, "z") is None


def test_strchr_terminator_finds_end():
    assert strings.strchr("abc", "\0") == len("abc")
    assert strings.strrchr("abc", "\0") == len("abc")


def test_strnstr_within_length():
    assert strings.strnstr("hello world", "world", 11) == "hello world".index("world")
    assert strings.strnstr("hello world", "world", 10) is None
    assert strings.strnstr("hello", "xyz", 5) is None


def test_strnstr_empty_cases():
    assert strings.strnstr("abc", "", 0) == 0
    assert strings.strnstr("", "a", 5) is None


def test_strncmp():
    assert strings.strncmp("abc", "abc", 3) == 0
    assert strings.strncmp("abd", "abc", 3) == ord("d") - ord("c")
    assert strings.strncmp("abd", "abc", 2) == 0
    assert strings.strncmp("ab", "abc", 5) == -ord("c")
    assert strings.strncmp("x", "y", 0) == 0


def test_strncmp_antisymmetric():
    assert strings.strncmp("pa\n", "pb\n", 3) == -strings.strncmp("pb\n", "pa\n", 3)


def test_strlen_strdup_strjoin():
    assert strings.strlen("push") == len("push")
    assert strings.strdup("swap") == "swap"
    joined = strings.strjoin("push", "_swap")
    assert joined == "push" + "_swap"
    assert strings.strlen(joined) == strings.strlen("push") + strings.strlen("_swap")


def test_substr():
    assert strings.substr("checker", 2, 3) == "checker"[2:5]
    assert strings.substr("abc", 10, 2) == ""
    assert strings.substr("abc", 1, 100) == "bc"


def test_substr_negative():
    with pytest.raises(ValueError):
        strings.substr("abc", -1, 2)


def test_strtrim():
    assert strings.strtrim("xxabcxy", "xy") == "abc"
    assert strings.strtrim("abc", "") == "abc"
    assert strings.strtrim("xxxx", "x") == ""


def test_strlcpy():
    assert strings.strlcpy("hello", 3) == ("he", len("hello"))
    assert strings.strlcpy("hello", 0) == ("", len("hello"))
    assert strings.strlcpy("hi", 10) == ("hi", len("hi"))


def test_strlcat():
    assert strings.strlcat("ab", "cdef", 5) == ("abcd", len("ab") + len("cdef"))
    assert strings.strlcat("abc", "de", 2) == ("abc", 2 + len("de"))
    assert strings.strlcat("ab", "cd", 100) == ("abcd", 4)


def test_strmapi_and_striteri():
    assert strings.strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strings.strmapi("aaa", lambda i, c: str(i)) == "012"
    assert strings.striteri("abc", lambda i, c: None) == "abc"
    assert strings.striteri("abc", lambda i, c: "z" if i == 1 else None) == "azc"