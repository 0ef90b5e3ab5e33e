"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import Union

_WHITESPACE = " \t\n\r\v\f"
_INT_BITS = 32
_LONG_BITS = 64

Code = Union[int, str]


def _code(value: Code) -> int:
    """Accept either a code point or a single character."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return value


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce *value* to a two's complement integer of *bits* width."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def is_alnum(code: Code) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_alpha(code: Code) -> bool:
    """True for ASCII letters."""
    c = _code(code)
    return ord("A") <= c <= ord("Z") or ord("a") <= c <= ord("z")


def is_ascii(code: Code) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(code) <= 127


def is_digit(code: Code) -> bool:
    """True for the ASCII digits."""
    return ord("0") <= _code(code) <= ord("9")


def is_print(code: Code) -> bool:
    """True for printable ASCII, space through tilde."""
    return ord(" ") <= _code(code) <= ord("~")


def to_lower(code: Code) -> int:
    """Lower-case an ASCII capital; other code points are returned unchanged."""
    c = _code(code)
    return c + 32 if ord("A") <= c <= ord("Z") else c


def to_upper(code: Code) -> int:
    """Upper-case an ASCII small letter; other code points are returned unchanged."""
    c = _code(code)
    return c - 32 if ord("a") <= c <= ord("z") else c


def _parse(text: str, bits: int) -> int:
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] == "+":
        stripped = stripped[1:]
    elif stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    number = 0
    for char in stripped:
        if not is_digit(char):
            break
        number = number * 10 + (ord(char) - ord("0"))
    return _wrap_signed(number * sign, bits)


def parse_int(text: str) -> int:
    """Parse a leading decimal integer, wrapping to 32 bits.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text without digits gives zero.
    """
    return _parse(text, _INT_BITS)


def parse_long(text: str) -> int:
    """Parse a leading decimal integer like :func:`parse_int`, wrapping to 64 bits."""
    return _parse(text, _LONG_BITS)


def int_to_str(number: int) -> str:
    """Decimal representation of *number*, with a leading minus when negative."""
    if number < 0:
        return "-" + int_to_str(-number)
    return str(number)