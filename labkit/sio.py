"""Signal-safe output: unbuffered writes straight to the standard output descriptor."""

from __future__ import annotations

import os

STDOUT_FILENO = 1
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def ltoa(value: int, base: int = 10) -> str:
    """Render ``value`` in ``base`` using lower-case digits and a leading minus."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}")
    negative = value < 0
    magnitude = -value if negative else value
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, base)
        digits.append(_DIGITS[digit])
        if magnitude == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def puts(text: str | bytes) -> int:
    """Write ``text`` to standard output in a single call; return bytes written."""
    data = text.encode() if isinstance(text, str) else bytes(text)
    return os.write(STDOUT_FILENO, data)


def putl(value: int) -> int:
    """Write ``value`` in decimal to standard output; return bytes written."""
    return puts(ltoa(value, 10))


def sio_error(text: str | bytes) -> None:
    """Write ``text`` to standard output and end the process at once with status 1."""
    puts(text)
    os._exit(1)