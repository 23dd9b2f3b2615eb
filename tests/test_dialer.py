import socket
import threading

import pytest

from adbhost import ServerNotAvailable, TcpDialer
from adbhost.dialer import split_address


@pytest.fixture
def listener():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(1)
    yield sock
    sock.close()


def serve_once(sock, response):
    def handle():
        conn, _ = sock.accept()
        with conn:
            conn.recv(1024)
            conn.sendall(response)
    thread = threading.Thread(target=handle, daemon=True)
    thread.start()
    return thread


def test_split_address():
    assert split_address("localhost:5037") == ("localhost", 5037)
    with pytest.raises(ValueError):
        split_address("localhost")


def test_dial_and_round_trip(listener):
    port = listener.getsockname()[1]
    thread = serve_once(listener, b"OKAY0004001f")

    with TcpDialer(timeout=5).dial(f"127.0.0.1:{port}") as conn:
        assert conn.round_trip(b"000chost:version") == b"OKAY0004001f"

    thread.join(timeout=5)


def test_dial_refused():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()

    with pytest.raises(ServerNotAvailable, match=f"error dialing 127.0.0.1:{port}") as excinfo:
        TcpDialer(timeout=5).dial(f"127.0.0.1:{port}")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_round_trip_on_held_connection_times_out(listener):
    port = listener.getsockname()[1]
    release = threading.Event()

    def handle():
        conn, _ = listener.accept()
        with conn:
            conn.recv(1024)
            conn.sendall(b"OKAY")
            release.wait(5)
    thread = threading.Thread(target=handle, daemon=True)
    thread.start()

    with TcpDialer(timeout=0.2).dial(f"127.0.0.1:{port}") as conn:
        with pytest.raises(OSError):
            conn.round_trip(b"0012host:transport-any")

    release.set()
    thread.join(timeout=5)
