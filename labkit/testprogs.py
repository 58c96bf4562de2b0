"""Small helper programs for exercising a job-control shell."""

from __future__ import annotations

import os
import re
import signal
import sys
import time

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def atoi(text: str) -> int:
    """Read a leading decimal integer from ``text``; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def spin(secs: int) -> None:
    """Sleep for ``secs`` seconds in one-second chunks."""
    for _ in range(secs):
        time.sleep(1)


def _seconds(argv: list[str] | None, name: str) -> int | None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Usage: {name} <n>", file=sys.stderr)
        return None
    return atoi(args[0])


def myspin_main(argv: list[str] | None = None) -> int:
    """Sleep for the given number of seconds."""
    secs = _seconds(argv, "myspin")
    if secs is not None:
        spin(secs)
    return 0


def myint_main(argv: list[str] | None = None) -> int:
    """Sleep for the given number of seconds, then send SIGINT to this process."""
    secs = _seconds(argv, "myint")
    if secs is None:
        return 0
    spin(secs)
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    try:
        os.kill(os.getpid(), signal.SIGINT)
    except OSError:
        sys.stderr.write("kill (int) error")
    return 0


def mystop_main(argv: list[str] | None = None) -> int:
    """Sleep for the given number of seconds, then send SIGTSTP to this process group."""
    secs = _seconds(argv, "mystop")
    if secs is None:
        return 0
    spin(secs)
    try:
        os.kill(-os.getpid(), signal.SIGTSTP)
    except OSError:
        sys.stderr.write("kill (tstp) error")
    return 0


def mysplit_main(argv: list[str] | None = None) -> int:
    """Fork a child that sleeps for the given number of seconds and wait for it."""
    secs = _seconds(argv, "mysplit")
    if secs is None:
        return 0
    if os.fork() == 0:
        spin(secs)
        os._exit(0)
    os.wait()
    return 0


if __name__ == "__main__":
    sys.exit(myspin_main())