import string

import pytest

from pipex.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


def test_atoi_negative_example():
    assert atoi("-123") == -123


@pytest.mark.parametrize("n", [0, 7, -7, 42, 1234567890, -85739873, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_zero():
    assert itoa(0) == "0"


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r42") == atoi("42")


def test_atoi_stops_at_non_digit():
    assert atoi("123abc456") == atoi("123")


def test_atoi_plus_sign_equals_unsigned():
    assert atoi("+99") == atoi("99")


def test_atoi_double_sign_gives_zero():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_no_digits_gives_zero():
    assert atoi("hello") == 0
    assert atoi("") == 0


def test_itoa_negative_has_minus_prefix():
    assert itoa(-85739873).startswith("-")
    assert itoa(-85739873)[1:] == itoa(85739873)


def test_is_alpha_matches_ascii_letters():
    for code in range(-5, 300):
        assert is_alpha(code) == (0 <= code < 128 and chr(code) in string.ascii_letters)


def test_is_digit_matches_ascii_digits():
    for code in range(-5, 300):
        assert is_digit(code) == (0 <= code < 128 and chr(code) in string.digits)


def test_is_alnum_is_union():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)


def test_character_arguments_accepted():
    assert is_alpha("a")
    assert not is_alpha("1")
    assert is_digit("9")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_to_upper_on_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower


def test_case_round_trip_and_type_preserved():
    for code in range(0, 256):
        assert to_lower(to_upper(code)) == (to_lower(code))
        assert isinstance(to_upper(code), int)
    assert isinstance(to_upper("q"), str)


def test_non_letters_unchanged():
    for ch in string.digits + string.punctuation + " ":
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch