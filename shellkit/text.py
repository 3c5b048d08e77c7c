"""String searching, comparison and bounded copying helpers."""

from __future__ import annotations

from typing import Callable

__all__ = [
    "find_char",
    "rfind_char",
    "find_within",
    "compare_prefix",
    "compare_bytes",
    "trim",
    "substring",
    "join",
    "bounded_copy",
    "bounded_concat",
    "map_indexed",
]

_NUL = "\0"


def _single(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def _non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def find_char(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    if _single(ch) == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def rfind_char(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    if _single(ch) == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0.
    """
    _non_negative(limit, "limit")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; the end of a string counts as 0.

    Returns the difference of the first differing character codes, or 0.
    """
    _non_negative(count, "count")
    for pos in range(count):
        a = ord(first[pos]) if pos < len(first) else 0
        b = ord(second[pos]) if pos < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def compare_bytes(first: bytes, second: bytes, count: int) -> int:
    """Compare the first ``count`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0.
    """
    _non_negative(count, "count")
    if count > len(first) or count > len(second):
        raise ValueError("count exceeds the length of a buffer")
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def trim(text: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``text``."""
    start = 0
    end = len(text)
    while start < end and text[start] in charset:
        start += 1
    while end > start and text[end - 1] in charset:
        end -= 1
    return text[start:end]


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start past the end gives the empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    return text[start:start + length]


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return first + second


def bounded_copy(source: str, size: int) -> tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` characters, NUL included.

    Returns the copied text and the full length of ``source``.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(source)
    return source[:size - 1], len(source)


def bounded_concat(dest: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had, where ``dest`` counts for at most ``size``.
    """
    _non_negative(size, "size")
    dest_length = len(dest)
    result = dest
    if size > 0 and dest_length < size - 1:
        result = dest + source[:size - 1 - dest_length]
    return result, min(dest_length, size) + len(source)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))