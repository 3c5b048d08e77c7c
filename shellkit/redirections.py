"""Input and output redirections: counting, stripping and opening their files."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO

from .heredoc import heredoc_path

__all__ = [
    "RedirectionError",
    "count_redirections",
    "strip_redirections",
    "open_input_files",
    "open_output_files",
]

_FILE_MODE = 0o777


class RedirectionError(Exception):
    """A redirection could not be set up."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def _marker_char(marker: str) -> str:
    if not isinstance(marker, str) or len(marker) != 1:
        raise ValueError(f"marker must be a single character, got {marker!r}")
    return marker


def count_redirections(marker: str, tokens: list[str]) -> int:
    """Number of tokens that start with ``marker``."""
    marker = _marker_char(marker)
    return sum(1 for token in tokens if token.startswith(marker))


def strip_redirections(tokens: list[str], marker: str) -> list[str]:
    """Tokens without the redirections starting with ``marker`` and their targets."""
    marker = _marker_char(marker)
    kept: list[str] = []
    remaining = iter(tokens)
    for token in remaining:
        if token.startswith(marker):
            next(remaining, None)
        else:
            kept.append(token)
    return kept


def _target_of(token: str, target: str | None) -> str:
    if target is None:
        raise RedirectionError(f"shell: syntax error near unexpected token `{token}'", 2)
    return target


def _close_all(files: list[BinaryIO]) -> None:
    for stream in files:
        stream.close()


def _open_fd(path: str | Path, flags: int, mode: str) -> BinaryIO:
    fd = os.open(path, flags, _FILE_MODE)
    return os.fdopen(fd, mode)


def open_input_files(
    tokens: list[str],
    directory: str | Path = ".",
    unquote: Callable[[str], str] | None = None,
) -> list[BinaryIO]:
    """Open the files of every input redirection, in the order they appear.

    ``<<`` opens the next here-document file from ``directory``, numbered
    from 0; ``<>`` opens its target for reading, creating it if missing;
    ``<`` opens its target for reading. Targets of ``<`` and ``<>`` are
    passed through ``unquote``. On failure every file opened so far is
    closed and :class:`RedirectionError` is raised.
    """
    files: list[BinaryIO] = []
    heredoc_index = 0
    remaining = iter(tokens)
    try:
        for token in remaining:
            if not token.startswith("<"):
                continue
            target = _target_of(token, next(remaining, None))
            if token.startswith("<<"):
                path = heredoc_path(heredoc_index, directory)
                try:
                    files.append(open(path, "rb"))
                except OSError as exc:
                    raise RedirectionError(
                        f"shell {path}: {exc.strerror}"
                    ) from exc
                heredoc_index += 1
                continue
            name = unquote(target) if unquote else target
            flags = os.O_RDONLY
            if token.startswith("<>"):
                flags |= os.O_CREAT
            try:
                files.append(_open_fd(name, flags, "rb"))
            except OSError as exc:
                raise RedirectionError(
                    f"shell {name}: No such file or directory"
                ) from exc
    except BaseException:
        _close_all(files)
        raise
    return files


def open_output_files(
    tokens: list[str],
    unquote: Callable[[str], str] | None = None,
) -> list[BinaryIO]:
    """Open the files of every output redirection, in the order they appear.

    ``>>`` opens its target for appending, taking the token as it stands;
    ``>`` passes its target through ``unquote`` and truncates it. Missing
    files are created. On failure every file opened so far is closed and
    :class:`RedirectionError` is raised with exit code 1.
    """
    files: list[BinaryIO] = []
    remaining = iter(tokens)
    try:
        for token in remaining:
            if not token.startswith(">"):
                continue
            target = _target_of(token, next(remaining, None))
            if token.startswith(">>"):
                name = target
                flags = os.O_WRONLY | os.O_CREAT | os.O_APPEND
                mode = "ab"
            else:
                name = unquote(target) if unquote else target
                flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
                mode = "wb"
            try:
                files.append(_open_fd(name, flags, mode))
            except OSError as exc:
                raise RedirectionError(f"shell: {name}: error", 1) from exc
    except BaseException:
        _close_all(files)
        raise
    return files