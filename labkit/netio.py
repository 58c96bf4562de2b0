"""Client and server socket helpers that try every address a lookup returns."""

from __future__ import annotations

import socket
import sys

LISTENQ = 1024

_NUMERICSERV = getattr(socket, "AI_NUMERICSERV", 0)
_ADDRCONFIG = getattr(socket, "AI_ADDRCONFIG", 0)


class AddressLookupError(OSError):
    """The address lookup for a host or port failed."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"getaddrinfo failed ({target}): {reason}")
        self.target = target
        self.reason = reason


def _lookup(host: str | None, port: str | int, flags: int, target: str):
    try:
        return socket.getaddrinfo(host, str(port), type=socket.SOCK_STREAM, flags=flags)
    except socket.gaierror as exc:
        reason = exc.strerror or str(exc)
        print(f"getaddrinfo failed ({target}): {reason}", file=sys.stderr)
        raise AddressLookupError(target, reason) from exc


def open_clientfd(hostname: str, port: str | int) -> socket.socket:
    """Connect to ``hostname:port`` and return the connected socket.

    Raises AddressLookupError when the lookup fails and OSError when no
    address accepts the connection.
    """
    candidates = _lookup(hostname, port, _NUMERICSERV | _ADDRCONFIG, f"{hostname}:{port}")
    last_error: OSError | None = None
    for family, socktype, proto, _canon, address in candidates:
        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as exc:
            last_error = exc
            continue
        try:
            sock.connect(address)
        except OSError as exc:
            last_error = exc
            sock.close()
            continue
        return sock
    if last_error is not None:
        raise last_error
    raise OSError(f"no address for {hostname}:{port} could be connected")


def open_listenfd(port: str | int) -> socket.socket:
    """Return a socket listening on ``port`` on any local address.

    Raises AddressLookupError when the lookup fails and OSError when no
    address can be bound or listened on.
    """
    candidates = _lookup(
        None, port, socket.AI_PASSIVE | _ADDRCONFIG | _NUMERICSERV, f"port {port}"
    )
    last_error: OSError | None = None
    for family, socktype, proto, _canon, address in candidates:
        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as exc:
            last_error = exc
            continue
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind(address)
        except OSError as exc:
            last_error = exc
            sock.close()
            continue
        try:
            sock.listen(LISTENQ)
        except OSError:
            sock.close()
            raise
        return sock
    if last_error is not None:
        raise last_error
    raise OSError(f"no address for port {port} could be bound")