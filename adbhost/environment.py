"""
Process Environment Module
File system probing and process spawning used by the adb server connection.

Everything the server connection needs from the operating system goes
through a ProcessEnvironment, so tests can substitute an in-memory fake.
"""

import os
import shutil
import stat
import subprocess
from typing import Protocol


class ProcessEnvironment(Protocol):
    """OS facilities required to locate and run the adb executable."""

    def look_path(self, name: str) -> str:
        """
        Search PATH for an executable.

        Raises:
            FileNotFoundError: If no executable with that name is found.
        """
        ...

    def check_executable(self, path: str) -> None:
        """
        Verify path is a regular file executable by the current user.

        Raises:
            OSError: If the file is missing, not regular, or not executable.
        """
        ...

    def combined_output(self, name: str, *args: str) -> bytes:
        """
        Run a command and return its interleaved stdout and stderr.

        Raises:
            subprocess.CalledProcessError: On non-zero exit, with the
                captured output attached.
            OSError: If the process could not be spawned.
        """
        ...


class LocalProcessEnvironment:
    """ProcessEnvironment backed by the real operating system."""

    def look_path(self, name: str) -> str:
        path = shutil.which(name)
        if path is None:
            raise FileNotFoundError(f"executable file not found in PATH: {name}")
        return path

    def check_executable(self, path: str) -> None:
        info = os.stat(path)
        if not stat.S_ISREG(info.st_mode):
            raise OSError(f"not a regular file: {path}")
        if not os.access(path, os.X_OK):
            raise PermissionError(f"not executable by current user: {path}")

    def combined_output(self, name: str, *args: str) -> bytes:
        result = subprocess.run(
            [name, *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
        if result.returncode != 0:
            raise subprocess.CalledProcessError(
                result.returncode, result.args, output=result.stdout
            )
        return result.stdout
