import subprocess
from typing import Optional

import pytest

from adbhost import ServerConfig


class FakeConnection:
    def __init__(self, name: str = "conn", response: bytes = b"OKAY"):
        self.name = name
        self.response = response
        self.requests: list[bytes] = []
        self.closed = False

    def round_trip(self, request: bytes) -> bytes:
        self.requests.append(request)
        return self.response

    def close(self) -> None:
        self.closed = True


class FakeDialer:
    """Replays scripted dial outcomes, one per call: a connection is returned, an exception raised.

    Dialing more often than scripted fails the test.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.addresses: list[str] = []

    def dial(self, address: str):
        self.addresses.append(address)
        if not self.outcomes:
            raise AssertionError(f"unexpected dial #{len(self.addresses)} to {address}")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def calls(self) -> int:
        return len(self.addresses)


def command_failure(args, output: bytes = b"", returncode: int = 1) -> subprocess.CalledProcessError:
    return subprocess.CalledProcessError(returncode, list(args), output=output)


class FakeProcessEnvironment:
    """In-memory ProcessEnvironment recording every call."""

    def __init__(self, path: Optional[str] = "/usr/bin/adb", executable: bool = True):
        self.path = path
        self.executable = executable
        self.looked_up: list[str] = []
        self.checked: list[str] = []
        self.commands: list[tuple[str, ...]] = []
        # argv tail -> bytes output or exception
        self.results: dict[tuple[str, ...], object] = {}

    def look_path(self, name: str) -> str:
        self.looked_up.append(name)
        if self.path is None:
            raise FileNotFoundError(f"executable file not found in PATH: {name}")
        return self.path

    def check_executable(self, path: str) -> None:
        self.checked.append(path)
        if not self.executable:
            raise PermissionError(f"not executable by current user: {path}")

    def combined_output(self, name: str, *args: str) -> bytes:
        self.commands.append((name,) + args)
        result = self.results.get(args, b"")
        if isinstance(result, Exception):
            raise result
        return result

    def runs_of(self, *args: str) -> int:
        return sum(1 for command in self.commands if command[1:] == args)


@pytest.fixture
def environment():
    return FakeProcessEnvironment()


@pytest.fixture
def dialer():
    return FakeDialer(FakeConnection())


@pytest.fixture
def config(environment, dialer):
    return ServerConfig(dialer=dialer, environment=environment)
