"""Robust I/O: unbuffered whole-count reads and writes, and a buffered reader."""

from __future__ import annotations

import os
from typing import Iterator, Protocol, Union

RIO_BUFSIZE = 8192
MAXLINE = 8192
MAXBUF = 8192


class _HasFileno(Protocol):
    def fileno(self) -> int: ...


Descriptor = Union[int, _HasFileno]


def _fileno(fd: Descriptor) -> int:
    return fd if isinstance(fd, int) else fd.fileno()


def _read_once(fd: int, size: int) -> bytes:
    """Read at most ``size`` bytes, restarting after an interrupted call."""
    while True:
        try:
            return os.read(fd, size)
        except InterruptedError:
            continue


def readn(fd: Descriptor, n: int) -> bytes:
    """Read up to ``n`` bytes from ``fd`` without buffering.

    Fewer bytes come back only when end of file is reached first.
    """
    if n < 0:
        raise ValueError("byte count must not be negative")
    fileno = _fileno(fd)
    chunks: list[bytes] = []
    remaining = n
    while remaining > 0:
        chunk = _read_once(fileno, remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def writen(fd: Descriptor, data: bytes | bytearray | memoryview | str) -> int:
    """Write all of ``data`` to ``fd`` and return the number of bytes written."""
    if isinstance(data, str):
        data = data.encode()
    fileno = _fileno(fd)
    view = memoryview(data).cast("B")
    total = len(view)
    while view:
        try:
            written = os.write(fileno, view)
        except InterruptedError:
            continue
        if written <= 0:
            raise OSError("write made no progress")
        view = view[written:]
    return total


class RioReader:
    """Buffered reader over a file descriptor."""

    def __init__(self, fd: Descriptor) -> None:
        self.fd = _fileno(fd)
        self._buf = b""
        self._pos = 0

    @property
    def _unread(self) -> int:
        return len(self._buf) - self._pos

    def _fill(self) -> bool:
        """Refill the internal buffer if empty; return False at end of file."""
        if self._unread > 0:
            return True
        chunk = _read_once(self.fd, RIO_BUFSIZE)
        self._buf = chunk
        self._pos = 0
        return bool(chunk)

    def _take(self, count: int) -> bytes:
        count = min(count, self._unread)
        piece = self._buf[self._pos:self._pos + count]
        self._pos += count
        return piece

    def read(self, n: int) -> bytes:
        """Read up to ``n`` bytes; fewer only at end of file."""
        if n < 0:
            raise ValueError("byte count must not be negative")
        chunks: list[bytes] = []
        remaining = n
        while remaining > 0 and self._fill():
            piece = self._take(remaining)
            chunks.append(piece)
            remaining -= len(piece)
        return b"".join(chunks)

    def readline(self, maxlen: int = MAXLINE) -> bytes:
        """Read one line, keeping its newline, of at most ``maxlen - 1`` bytes.

        Returns ``b""`` at end of file when nothing was read.
        """
        limit = maxlen - 1
        chunks: list[bytes] = []
        got = 0
        while got < limit and self._fill():
            window = min(limit - got, self._unread)
            end = self._buf.find(b"\n", self._pos, self._pos + window)
            if end >= 0:
                chunks.append(self._take(end - self._pos + 1))
                break
            piece = self._take(window)
            chunks.append(piece)
            got += len(piece)
        return b"".join(chunks)

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.readline(MAXLINE)
            if not line:
                return
            yield line