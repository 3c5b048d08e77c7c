"""Writing characters, strings and numbers, and a small printf-style formatter."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

__all__ = [
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
    "format_printf",
    "print_formatted",
]

_UINT32 = (1 << 32) - 1
_UINT64 = (1 << 64) - 1
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {value!r}")
    return value


def _signed32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value > 0x7FFFFFFF else value


def put_char(ch: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    _target(stream).write(ch)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write a string."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {text!r}")
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline; an empty string writes nothing."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {text!r}")
    if text:
        _target(stream).write(text + "\n")


def put_nbr(number: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {number!r}")
    _target(stream).write(str(number))


def _next(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    """Render one conversion; unknown conversions render as nothing."""
    if spec == "%":
        return "%"
    if spec == "c":
        value = _next(args, spec)
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(_require_int(value, spec) & 0xFF)
    if spec == "s":
        value = _next(args, spec)
        if value is None:
            return _NULL_STRING
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {value!r}")
        return value
    if spec == "p":
        value = _next(args, spec)
        address = 0 if value is None else _require_int(value, spec) & _UINT64
        return _NULL_POINTER if address == 0 else f"0x{address:x}"
    if spec in ("d", "i"):
        return str(_signed32(_require_int(_next(args, spec), spec)))
    if spec == "u":
        return str(_require_int(_next(args, spec), spec) & _UINT32)
    if spec == "x":
        return f"{_require_int(_next(args, spec), spec) & _UINT32:x}"
    if spec == "X":
        return f"{_require_int(_next(args, spec), spec) & _UINT32:X}"
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with the conversions %%, c, s, p, d, i, u, x and X.

    Any other conversion is dropped together with its percent sign; a lone
    percent sign at the end is kept. Surplus arguments are ignored.
    """
    remaining = iter(args)
    pieces: list[str] = []
    pos = 0
    while pos < len(fmt):
        if fmt[pos] == "%" and pos + 1 < len(fmt):
            pieces.append(_convert(fmt[pos + 1], remaining))
            pos += 2
        else:
            pieces.append(fmt[pos])
            pos += 1
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text and return the number of characters written."""
    text = format_printf(fmt, *args)
    _target(stream).write(text)
    return len(text)