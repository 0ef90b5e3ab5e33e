"""Formatted output: characters, strings, numbers and a small printf."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


class FormatError(ValueError):
    """Raised for a bad conversion specifier or a missing argument."""


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _as_uint32(value: int) -> int:
    return value & _UINT_MASK


def _to_hex(value: int, upper: bool) -> str:
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rest = divmod(value, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def _char_text(char: Union[str, int]) -> str:
    if isinstance(char, int):
        return chr(char & 0xFF)
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _pointer_text(address: Optional[int]) -> str:
    if not address:
        return _NULL_POINTER
    return "0x" + _to_hex(address & _POINTER_MASK, upper=False)


def _emit(text: str, stream: Optional[TextIO]) -> int:
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)


def put_char(char: Union[str, int], stream: Optional[TextIO] = None) -> int:
    """Write one character (or a code point) and return 1."""
    return _emit(_char_text(char), stream)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write *text*; nothing is written for ``None``. Returns the count."""
    if text is None:
        return 0
    return _emit(text, stream)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write *text* followed by a newline; nothing for ``None``."""
    if text is None:
        return 0
    return _emit(text + "\n", stream)


def put_number(number: int, stream: Optional[TextIO] = None) -> int:
    """Write a signed 32-bit integer in decimal."""
    return _emit(str(_as_int32(number)), stream)


def put_hex(value: int, upper: bool = False, stream: Optional[TextIO] = None) -> int:
    """Write an unsigned 32-bit value in hexadecimal."""
    return _emit(_to_hex(_as_uint32(value), upper), stream)


def put_pointer(address: Optional[int], stream: Optional[TextIO] = None) -> int:
    """Write an address as ``0x...``, or ``(nil)`` for a null address."""
    return _emit(_pointer_text(address), stream)


def put_unsigned(value: int, stream: Optional[TextIO] = None) -> int:
    """Write an unsigned 32-bit value in decimal."""
    return _emit(str(_as_uint32(value)), stream)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "idsxXcpu" or not spec:
        raise FormatError(f"unsupported conversion {'%' + spec!r}")
    try:
        arg = next(args)
    except StopIteration:
        raise FormatError(f"missing argument for {'%' + spec!r}") from None
    if spec in "id":
        return str(_as_int32(arg))
    if spec == "s":
        return _NULL_STRING if arg is None else str(arg)
    if spec == "x":
        return _to_hex(_as_uint32(arg), upper=False)
    if spec == "X":
        return _to_hex(_as_uint32(arg), upper=True)
    if spec == "c":
        return _char_text(arg)
    if spec == "p":
        return _pointer_text(arg)
    return str(_as_uint32(arg))


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``%d %i %s %x %X %c %p %u %%`` in *fmt* with *args*.

    Raises FormatError for any other specifier, a trailing ``%`` or a
    missing argument.
    """
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for char in chars:
        if char == "%":
            pieces.append(_convert(next(chars, ""), remaining))
        else:
            pieces.append(char)
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of *fmt* to standard output and return its length."""
    return _emit(format_string(fmt, *args), None)