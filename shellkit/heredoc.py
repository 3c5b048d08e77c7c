"""Here-documents: collecting input up to a limiter into temporary files."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator, Mapping
from pathlib import Path
from typing import TextIO, Union

from .chars import is_alnum

__all__ = [
    "HeredocError",
    "expand_line",
    "has_quote",
    "heredoc_path",
    "write_heredoc",
    "open_heredocs",
    "remove_heredocs",
]

Environment = Union[Mapping[str, str], Iterable[str], None]

_FILE_PREFIX = ".here_doc_"
_OPERATOR_STARTS = (">", "<", "|")
_INTERRUPTED_EXIT_CODE = 130


class HeredocError(Exception):
    """A here-document could not be set up or was interrupted."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def _lookup(env: Environment, name: str) -> list[str]:
    """Values of every environment entry whose key is exactly ``name``."""
    if env is None:
        return []
    if isinstance(env, Mapping):
        return [env[name]] if name in env else []
    values = []
    for entry in env:
        key, sep, value = entry.partition("=")
        if key == name:
            # An entry without '=' matches but has no value to print.
            values.append(value if sep else "")
    return values


def expand_line(line: str, env: Environment = None, exit_code: int = 0) -> str:
    """Expand ``$NAME`` and ``$?`` in a here-document line.

    Names are made of ASCII letters and digits. An unknown name expands to
    nothing, a ``$`` at the very end is kept, and a ``$`` followed by any
    other character is dropped.
    """
    pieces: list[str] = []
    pos = 0
    length = len(line)
    while pos < length:
        ch = line[pos]
        if ch != "$":
            pieces.append(ch)
            pos += 1
            continue
        pos += 1
        if pos == length:
            pieces.append("$")
            break
        if line[pos] == "?":
            pieces.append(str(exit_code))
            pos += 1
            continue
        start = pos
        while pos < length and is_alnum(line[pos]):
            pos += 1
        pieces.extend(_lookup(env, line[start:pos]))
    return "".join(pieces)


def has_quote(text: str) -> bool:
    """True if ``text`` holds a single or double quote."""
    return "'" in text or '"' in text


def heredoc_path(index: int, directory: str | Path = ".") -> Path:
    """Path of the temporary file for the here-document numbered ``index``."""
    return Path(directory) / f"{_FILE_PREFIX}{index}"


def _prompt_lines() -> Iterator[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def write_heredoc(
    stream: TextIO,
    limiter: str,
    lines: Iterable[str] | None = None,
    env: Environment = None,
    exit_code: int = 0,
    expand: bool = True,
    warn: TextIO | None = None,
) -> bool:
    """Copy ``lines`` to ``stream`` until a line equal to ``limiter``.

    Each line is written with a newline; with ``expand`` set, variables are
    expanded first. Running out of lines ends the document with a warning on
    ``warn`` (standard error by default). Returns True if the document was
    ended by running out of lines rather than by the limiter.
    """
    source = _prompt_lines() if lines is None else lines
    for raw in source:
        line = raw[:-1] if raw.endswith("\n") else raw
        if line == limiter:
            return False
        stream.write(expand_line(line, env, exit_code) if expand else line)
        stream.write("\n")
    target = sys.stderr if warn is None else warn
    target.write(
        "shell: warning: here-document delimited by end-of-file "
        f"(wanted `{limiter}')\n"
    )
    return True


def open_heredocs(
    tokens: list[str],
    lines: Iterable[str] | None = None,
    env: Environment = None,
    exit_code: int = 0,
    directory: str | Path = ".",
    unquote: Callable[[str], str] | None = None,
) -> int:
    """Write every ``<<`` here-document of a command line to its file.

    Documents are numbered from 0 in the order they appear and all read from
    the same ``lines``. A limiter holding a quote is not expanded; ``unquote``
    turns the limiter token into the limiter text. Returns the number of
    documents written. Raises :class:`HeredocError` for a missing limiter, a
    limiter that is an operator, or an interruption, which also removes the
    files written so far.
    """
    if not any(token.startswith("<") for token in tokens):
        return 0
    source = iter(_prompt_lines() if lines is None else lines)
    count = 0
    tokens_iter = iter(tokens)
    for token in tokens_iter:
        if not token.startswith("<<"):
            continue
        limiter_token = next(tokens_iter, None)
        if limiter_token is None or limiter_token.startswith(_OPERATOR_STARTS):
            raise HeredocError(f"syntax error near here-document {token!r}")
        limiter = unquote(limiter_token) if unquote else limiter_token
        path = heredoc_path(count, directory)
        try:
            with open(path, "w", encoding="utf-8") as stream:
                write_heredoc(
                    stream,
                    limiter,
                    source,
                    env,
                    exit_code,
                    expand=not has_quote(limiter_token),
                )
        except KeyboardInterrupt:
            remove_heredocs(directory)
            raise HeredocError(
                "here-document interrupted", _INTERRUPTED_EXIT_CODE
            ) from None
        except OSError as exc:
            raise HeredocError(f"cannot create {path}: {exc.strerror}") from exc
        count += 1
    return count


def remove_heredocs(directory: str | Path = ".") -> int:
    """Delete here-document files numbered from 0 up to the first one missing.

    Returns the number of files removed.
    """
    removed = 0
    while True:
        path = heredoc_path(removed, directory)
        if not path.exists():
            return removed
        path.unlink()
        removed += 1