import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)

ascii_chars = st.integers(min_value=0, max_value=127).map(chr)


@given(ascii_chars)
def test_is_digit_matches_string_digits(c):
    assert is_digit(c) == (c in string.digits)


@given(ascii_chars)
def test_is_alpha_matches_ascii_letters(c):
    assert is_alpha(c) == (c in string.ascii_letters)


@given(ascii_chars)
def test_is_alnum_is_alpha_or_digit(c):
    assert is_alnum(c) == (is_alpha(c) or is_digit(c))


@given(ascii_chars)
def test_is_print_matches_printable_without_whitespace_controls(c):
    expected = c in string.printable and (c == " " or c not in string.whitespace)
    assert is_print(c) == expected


@pytest.mark.parametrize("c", list(" \t\n\v\f\r"))
def test_is_space_true_for_whitespace(c):
    assert is_space(c) is True


@pytest.mark.parametrize("c", ["a", "0", "\x00", "\x08", "\x0e", "~"])
def test_is_space_false_for_others(c):
    assert is_space(c) is False


@given(st.integers(min_value=-1000, max_value=1000))
def test_is_ascii_range(code):
    assert is_ascii(code) == (0 <= code <= 127)


def test_non_ascii_letter_is_not_alpha():
    assert is_alpha("é") is False
    assert is_ascii("é") is False


@given(ascii_chars)
def test_case_conversion_matches_ascii_letters(c):
    if c in string.ascii_letters:
        assert to_lower(c) == c.lower()
        assert to_upper(c) == c.upper()
    else:
        assert to_lower(c) == c
        assert to_upper(c) == c


@given(st.integers(min_value=0, max_value=300))
def test_case_conversion_keeps_int_type(code):
    lowered = to_lower(code)
    assert isinstance(lowered, int)
    assert to_lower(to_upper(code)) == to_lower(code)


def test_non_ascii_unchanged():
    assert to_upper("ß") == "ß"
    assert to_lower("Ä") == "Ä"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)