"""Character classification, integer conversion and word splitting."""

from __future__ import annotations

__all__ = [
    "atoi",
    "itoa",
    "is_alnum",
    "is_alpha",
    "is_ascii",
    "is_digit",
    "is_print",
    "to_lower",
    "to_upper",
    "split",
]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_SIGNS = frozenset("+-")
_INT_BITS = 32


def _code(ch: str | int) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected a character or an integer code, got {ch!r}")
    return ch


def _wrap_int(value: int) -> int:
    """Wrap a value into the signed 32-bit range."""
    span = 1 << _INT_BITS
    value %= span
    if value >= span // 2:
        value -= span
    return value


def atoi(text: str) -> int:
    """Parse a leading integer from ``text``.

    Leading whitespace is skipped and a single sign is honoured. Two sign
    characters in a row yield 0, as does the absence of digits. The result
    wraps around like a signed 32-bit integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    if text[pos:pos + 1] in _SIGNS and text[pos + 1:pos + 2] in _SIGNS and text[pos + 1:pos + 2]:
        return 0
    negative = False
    while pos < len(text) and text[pos] in _SIGNS:
        if text[pos] == "-":
            negative = not negative
        pos += 1
    number = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        number = _wrap_int(number * 10 + ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap_int(-number if negative else number)


def itoa(number: int) -> str:
    """Render an integer in decimal."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {number!r}")
    return str(number)


def is_alnum(ch: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(ch) or is_digit(ch)


def is_alpha(ch: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(ch)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_ascii(code: str | int) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(code) <= 127


def is_digit(ch: str | int) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(ch) <= ord("9")


def is_print(code: str | int) -> bool:
    """True for visible ASCII characters; the space is not counted."""
    return 32 < _code(code) <= 126


def to_lower(ch: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(ch)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(ch, str) else code


def to_upper(ch: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(ch)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(ch, str) else code


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) > 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if not sep:
        return [text] if text else []
    return [word for word in text.split(sep) if word]