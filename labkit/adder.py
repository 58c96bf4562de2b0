"""A minimal CGI program that adds two numbers from the query string."""

from __future__ import annotations

import os
import re
import sys

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_query(query: str) -> tuple[int, int]:
    """Split ``query`` at its first ``&`` and read a leading integer from each side."""
    first, sep, second = query.partition("&")
    if not sep:
        raise ValueError("query string must hold two arguments separated by '&'")
    return _atoi(first), _atoi(second)


def render_content(n1: int, n2: int) -> str:
    """Return the HTML body that reports the sum."""
    return (
        "Welcome to add.com: "
        "THE Internet addition portal.\r\n<p>"
        f"The answer is: {n1} + {n2} = {n1 + n2}\r\n<p>"
        "Thanks for visiting!\r\n"
    )


def build_response(query: str | None) -> str:
    """Return the CGI output (headers and body) for ``query``; None means no query."""
    n1, n2 = parse_query(query) if query is not None else (0, 0)
    content = render_content(n1, n2)
    return (
        "Connection: close\r\n"
        f"Content-length: {len(content.encode())}\r\n"
        "Content-type: text/html\r\n\r\n"
        f"{content}"
    )


def main(argv: list[str] | None = None) -> int:
    """Write the response for the QUERY_STRING environment variable."""
    sys.stdout.write(build_response(os.environ.get("QUERY_STRING")))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())