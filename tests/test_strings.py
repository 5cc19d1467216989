import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.libft.strings import (
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)

ascii_text = st.text(
    alphabet=st.characters(min_codepoint=1, max_codepoint=127), max_size=30
)


def test_strlen_source_examples():
    assert strlen("hi") == 2
    assert strlen("") == 0


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == strlen("abc")


@given(ascii_text)
def test_strlen_matches_len_without_nul(s):
    assert strlen(s) == len(s)


def test_strchr_finds_first():
    text = "salam azizam, azizam salam"
    index = strchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[:index]


def test_strrchr_finds_last():
    text = "salam azizam, azizam salam"
    index = strrchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[index + 1 :]


def test_strchr_missing_is_none():
    assert strchr("salam", "q") is None
    assert strrchr("salam", "q") is None


def test_strchr_nul_finds_terminator():
    text = "salam"
    assert strchr(text, "\0") == len(text)
    assert strrchr(text, 0) == len(text)


def test_strchr_reduces_code_to_char():
    text = "salam"
    assert strchr(text, ord("l") + 256) == strchr(text, "l")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strdup_copies_until_nul():
    assert strdup("Hello World") == "Hello World"
    assert strdup("Hello\0World") == "Hello"


def test_strlcpy_source_example():
    src = "Hello, world"
    copied, total = strlcpy(src, 6)
    assert total == len(src)
    assert len(copied) == 5
    assert src.startswith(copied)


def test_strlcpy_zero_size():
    copied, total = strlcpy("abc", 0)
    assert copied == ""
    assert total == len("abc")


@given(ascii_text, st.integers(min_value=1, max_value=40))
def test_strlcpy_invariants(src, size):
    copied, total = strlcpy(src, size)
    assert total == len(src)
    assert len(copied) == min(len(src), size - 1)
    assert src.startswith(copied)


def test_strlcat_source_example():
    dst, src = "Hello", ", world!"
    result, total = strlcat(dst, src, 9)
    assert total == len(dst) + len(src)
    assert len(result) == 8
    assert (dst + src).startswith(result)


def test_strlcat_size_not_above_dst():
    dst, src = "Hello", ", world!"
    result, total = strlcat(dst, src, 3)
    assert result == dst
    assert total == 3 + len(src)


def test_strlcat_enough_room():
    dst, src = "Hello", ", world!"
    result, total = strlcat(dst, src, 80)
    assert result == dst + src
    assert total == len(result)


def test_strncmp_source_example():
    first, second = "Hello World", "Hello world"
    assert strncmp(first, second, 6) == 0
    assert strncmp(first, second, 9) == ord("W") - ord("w")


def test_strncmp_zero_count():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("abc", "abcd", 10) == -ord("d")


@given(ascii_text, ascii_text, st.integers(min_value=0, max_value=40))
def test_strncmp_sign_matches_python_order(a, b, n):
    result = strncmp(a, b, n)
    expected = (a[:n] > b[:n]) - (a[:n] < b[:n])
    assert (result > 0) - (result < 0) == expected


def test_strnstr_within_length():
    big = "salam azizam, azizam salam"
    index = strnstr(big, "azizam", 15)
    assert big[index : index + len("azizam")] == "azizam"
    assert strnstr(big, "hi", 15) is None


def test_strnstr_match_must_fit_length():
    big = "salam azizam"
    assert strnstr(big, "azizam", len(big) - 1) is None
    assert strnstr(big, "azizam", len(big)) == big.index("azizam")


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


@given(ascii_text, ascii_text, st.integers(min_value=0, max_value=40))
def test_strnstr_invariants(big, little, length):
    index = strnstr(big, little, length)
    if index is None:
        assert little not in big[:length]
    else:
        assert big[index : index + len(little)] == little
        assert little == "" or index + len(little) <= length
        assert little not in big[: index + len(little) - 1] or little == ""