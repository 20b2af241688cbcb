"""String and byte-sequence helpers: splitting, trimming, searching, comparing."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Union

_Text = Union[str, bytes]


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _code_at(seq: _Text, i: int) -> int:
    """Return the code at ``i``, or 0 past the end, as a terminator would read."""
    if i >= len(seq):
        return 0
    item = seq[i]
    return item if isinstance(item, int) else ord(item)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep)
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A ``start`` at or past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` wholly inside the first ``limit`` characters, or None.

    An empty ``needle`` is found at index 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def compare_prefix(a: _Text, b: _Text, n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of either string.

    Returns the difference of the first differing codes, or 0 when equal.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for i in range(n):
        ca, cb = _code_at(a, i), _code_at(b, i)
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def compare_bytes(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first differing bytes, or 0 when equal.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if len(a) < n or len(b) < n:
        raise ValueError("both sequences must hold at least n bytes")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def find_byte(data: bytes, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value & 0xFF`` in the first ``n`` bytes."""
    if n < 0:
        raise ValueError("n must not be negative")
    if len(data) < n:
        raise ValueError("data must hold at least n bytes")
    index = data.find(bytes([value & 0xFF]), 0, n)
    return None if index < 0 else index


def find_char(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; a NUL matches the end of the text."""
    _single_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == "\0" else None


def rfind_char(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; a NUL matches the end of the text."""
    _single_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))


def iter_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each item; a non-None result replaces it."""
    for i, ch in enumerate(list(chars)):
        result = func(i, ch)
        if result is not None:
            chars[i] = result


def join(a: str, b: str) -> str:
    """Concatenate two strings."""
    return a + b


def length(text: str) -> int:
    """Number of characters before the first NUL, or the whole length."""
    index = text.find("\0")
    return len(text) if index < 0 else index