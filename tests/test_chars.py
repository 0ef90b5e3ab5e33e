import string

import pytest

from pipex.chars import (
    int_to_str,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    parse_int,
    parse_long,
    to_lower,
    to_upper,
)


def test_letters_are_alpha_and_digits_are_not():
    assert all(is_alpha(c) for c in string.ascii_letters)
    assert not any(is_alpha(c) for c in string.digits)


def test_digits_are_digits():
    assert all(is_digit(ord(c)) for c in string.digits)
    assert not is_digit(ord("a"))
    assert not is_digit(ord("/"))
    assert not is_digit(ord(":"))


@pytest.mark.parametrize("code", range(256))
def test_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_ascii_range_bounds():
    assert all(is_ascii(c) for c in range(128))
    assert not is_ascii(128)
    assert not is_ascii(-1)


@pytest.mark.parametrize("code", range(128))
def test_print_matches_printable_ascii(code):
    assert is_print(code) == chr(code).isprintable()


def test_case_conversion_of_letters():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower("Z") == ord("z")


@pytest.mark.parametrize("char", string.ascii_lowercase)
def test_case_round_trip(char):
    assert to_lower(to_upper(char)) == ord(char)
    assert chr(to_upper(char)) == char.upper()


@pytest.mark.parametrize("char", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_others(char):
    assert to_upper(char) == ord(char)
    assert to_lower(char) == ord(char)


def test_multi_character_code_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("number", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_int_round_trip(number):
    assert parse_int(int_to_str(number)) == number


@pytest.mark.parametrize("prefix", [" ", "\t\n", "\v\f\r  "])
def test_parse_skips_whitespace_and_trailing_text(prefix):
    number = -42
    assert parse_int(prefix + int_to_str(number) + "abc") == number
    assert parse_int(prefix + "+" + int_to_str(-number)) == -number


def test_parse_without_digits_is_zero():
    assert parse_int("") == 0
    assert parse_int("++5") == parse_int("abc")
    assert parse_int("-") == parse_int("")


def test_parse_int_wraps_to_32_bits():
    assert parse_int("2147483648") == -2147483648


def test_parse_long_keeps_values_beyond_int():
    assert parse_long("9223372036854775807") == 9223372036854775807
    assert parse_long(int_to_str(-2147483649)) == -2147483649


def test_int_to_str_extremes():
    assert int_to_str(-2147483648) == "-2147483648"
    assert int_to_str(2147483647) == "2147483647"