"""
Dialer Module
Opens connections to the adb server.

Request framing is the caller's concern: a Connection only moves the
bytes it is given and hands back what the server sends.
"""

import socket
from typing import Optional, Protocol

from .adb_models import ServerNotAvailable


class Connection(Protocol):
    """An open connection to the adb server."""

    def round_trip(self, request: bytes) -> bytes:
        ...

    def close(self) -> None:
        ...


class Dialer(Protocol):
    """Connects to an address of the form ``host:port``."""

    def dial(self, address: str) -> Connection:
        """
        Raises:
            ServerNotAvailable: If the connection could not be established.
        """
        ...


def split_address(address: str) -> tuple[str, int]:
    """Split ``host:port`` into its parts. The port is taken after the last colon."""
    host, sep, port = address.rpartition(":")
    if not sep or not host:
        raise ValueError(f"invalid address: {address!r}")
    return host, int(port)


class TcpConnection:
    """Connection over a plain TCP socket."""

    def __init__(self, sock: socket.socket):
        self._sock = sock

    def round_trip(self, request: bytes) -> bytes:
        """
        Send request and read the response until the server closes its side.

        Only suits one-shot requests the server answers and then hangs up on,
        such as host:version. After a host:transport* request the server keeps
        the connection open, so this blocks until the dialer timeout (if any)
        raises.
        """
        self._sock.sendall(request)
        chunks = []
        while True:
            chunk = self._sock.recv(4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> "TcpConnection":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class TcpDialer:
    """Default dialer. Blocks for as long as the OS connect does unless a timeout is given."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def dial(self, address: str) -> TcpConnection:
        host, port = split_address(address)
        try:
            sock = socket.create_connection((host, port), timeout=self.timeout)
        except OSError as e:
            raise ServerNotAvailable(f"error dialing {address}: {e}") from e
        return TcpConnection(sock)
