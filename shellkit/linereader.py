"""Line-at-a-time reading from raw file descriptors."""

from __future__ import annotations

import os

__all__ = ["LineReader"]

_NEWLINE = b"\n"


class LineReader:
    """Read lines from file descriptors, keeping unread data per descriptor.

    Each call to :meth:`read_line` reads ``buffer_size`` bytes at a time until
    a newline shows up or the descriptor reaches end of file. Data read past
    the newline is kept for the next call on the same descriptor.
    """

    def __init__(self, buffer_size: int = 1) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer size must be an integer, got {buffer_size!r}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def read_line(self, fd: int) -> str | None:
        """Return the next line of ``fd`` with its newline, or None at end of file.

        The last line of a file that does not end in a newline is returned
        without one. A read error drops whatever was kept for ``fd`` and is
        raised as :class:`OSError`.
        """
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError(f"file descriptor must be an integer, got {fd!r}")
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        stash = bytearray(self._pending.pop(fd, b""))
        while _NEWLINE not in stash:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            stash += chunk
        if not stash:
            return None
        end = stash.find(_NEWLINE)
        if 0 <= end < len(stash) - 1:
            self._pending[fd] = bytes(stash[end + 1:])
            del stash[end + 1:]
        return stash.decode("utf-8", errors="surrogateescape")

    def discard(self, fd: int) -> None:
        """Forget any data kept for ``fd``."""
        self._pending.pop(fd, None)