"""Proxy entry point; prints the User-Agent header line it sends upstream."""

from __future__ import annotations

import sys

MAX_CACHE_SIZE = 1049000
MAX_OBJECT_SIZE = 102400

USER_AGENT_HDR = (
    "User-Agent: Mozilla/5.0 (X11; Linux x86_64; rv:10.0.3) "
    "Gecko/20120305 Firefox/10.0.3\r\n"
)


def main(argv: list[str] | None = None) -> int:
    """Print the User-Agent header line."""
    sys.stdout.write(USER_AGENT_HDR)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())