import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(256))
def test_classification_matches_ascii_sets(code):
    ch = chr(code)
    assert is_alpha(code) == (ch in string.ascii_letters)
    assert is_digit(code) == (ch in string.digits)
    assert is_alnum(code) == (ch in string.ascii_letters + string.digits)
    assert is_ascii(code) == (code < 128)
    assert is_print(code) == (ch in string.printable and ch not in "\t\n\r\x0b\x0c")


def test_string_and_int_inputs_agree():
    for ch in string.printable:
        assert is_alpha(ch) == is_alpha(ord(ch))
        assert is_digit(ch) == is_digit(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


def test_negative_code_is_not_ascii():
    assert is_ascii(-1) is False
    assert is_print(-1) is False


def test_to_upper_maps_lowercase_letters():
    for low, up in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(low) == up
        assert to_upper(ord(low)) == ord(up)


def test_to_lower_maps_uppercase_letters():
    for low, up in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_lower(up) == low
        assert to_lower(ord(up)) == ord(low)


@given(st.integers(min_value=-10, max_value=1000))
def test_case_conversion_leaves_non_letters(code):
    if not is_alpha(code):
        assert to_upper(code) == code
        assert to_lower(code) == code


@given(st.sampled_from(string.ascii_letters))
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)