"""String helpers: word splitting, bounded copies, searches and trimming."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional

_NUL = "\0"


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split_words(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty words."""
    return [word for word in text.split(sep) if word]


def join(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; ``None`` when both are missing."""
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def compare_prefix(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters, returning the code point difference.

    Comparison stops at the first differing character or at the end of
    either string; zero means the compared prefixes are equal.
    """
    _check_non_negative("n", n)
    pairs = zip_longest(first[:n], second[:n], fillvalue=_NUL)
    for a, b in pairs:
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* slots (one kept for the terminator).

    Returns the copied text and the full length of *src*, so truncation
    happened whenever that length is at least *size*.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* slots.

    Returns the resulting text and the length the full result would have
    needed. When *size* does not exceed ``len(dst)`` nothing is appended and
    the reported length is ``len(src) + size``.
    """
    _check_non_negative("size", size)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first *char* in *text*; the terminator is found at the end."""
    index = text.find(char)
    if index >= 0:
        return index
    if char == _NUL:
        return len(text)
    return None


def rfind_char(text: str, char: str) -> Optional[int]:
    """Index of the last *char* in *text*; the terminator is found at the end."""
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* lying wholly within the first *length* characters."""
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def trim(text: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *text*."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start : start + length]


def map_chars(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def iterate_chars(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Visit every character with ``func(index, char)``.

    The callback may return a replacement character; returning ``None``
    keeps the character as it is. The resulting string is returned.
    """
    result = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)