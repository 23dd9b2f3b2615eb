"""
ADB Server Module
Locates the adb executable, starts the adb server and connects to it.
"""

import logging
import subprocess
from dataclasses import replace
from typing import Optional

from .adb_models import ADBError, ServerNotAvailable
from .config import ADB_EXECUTABLE_NAME, ADB_PORT, DEFAULT_HOST, ServerConfig
from .dialer import Connection, TcpDialer
from .environment import LocalProcessEnvironment
from .utils import format_command, output_text

logger = logging.getLogger(__name__)


class AdbServer:
    """
    Knows how to start the adb server and connect to it.

    Not safe for concurrent use: two callers racing through dial() may both
    try to start the server. Serialize access externally if needed.
    """

    def __init__(self, config: Optional[ServerConfig] = None):
        """
        Resolve defaults and validate the adb executable.

        Args:
            config: Optional settings. Unset fields get defaults.

        Raises:
            ServerNotAvailable: If adb is not on PATH, or the configured
                path is not an executable regular file.
        """
        config = replace(config) if config is not None else ServerConfig()

        if config.dialer is None:
            config.dialer = TcpDialer()
        if not config.host:
            config.host = DEFAULT_HOST
        if not config.port:
            config.port = ADB_PORT
        if config.environment is None:
            config.environment = LocalProcessEnvironment()
        if config.logger is None:
            config.logger = logger

        if not config.adb_path:
            try:
                config.adb_path = config.environment.look_path(ADB_EXECUTABLE_NAME)
            except OSError as e:
                raise ServerNotAvailable(
                    f"could not find {ADB_EXECUTABLE_NAME} in PATH: {e}"
                ) from e
        try:
            config.environment.check_executable(config.adb_path)
        except OSError as e:
            raise ServerNotAvailable(
                f"invalid adb executable: {config.adb_path}: {e}"
            ) from e

        self._config = config
        self._log = config.logger

        # Cached so it isn't rebuilt for every dial.
        self._address = f"{config.host}:{config.port}"

    @property
    def address(self) -> str:
        return self._address

    @property
    def adb_path(self) -> str:
        return self._config.adb_path

    def dial(self) -> Connection:
        """
        Connect to the server, starting it if the first attempt fails.

        At most two dials and one start are attempted. A failure of the
        second dial propagates unchanged.

        Raises:
            ServerNotAvailable: If the server had to be started and could not
                be, or the dialer's own error from the dial after the start.
        """
        try:
            return self._config.dialer.dial(self._address)
        except (OSError, ADBError) as e:
            self._log.info("Could not connect to adb server at %s (%s), starting it", self._address, e)

        try:
            self.start()
        except ServerNotAvailable as e:
            raise ServerNotAvailable("error starting server for dial", output=e.output) from e

        return self._config.dialer.dial(self._address)

    def start(self) -> None:
        """
        Ensure there is a server running.

        Tries ``adb tcp:<address> start-server`` first and falls back to a
        plain ``adb start-server``. Output of the attempt whose result is
        used ends up in the error.

        Raises:
            ServerNotAvailable: If the server could not be started.
        """
        try:
            output = self._run(f"tcp:{self._address}", "start-server")
        except (subprocess.CalledProcessError, OSError) as e:
            self._log.warning("Address-qualified start-server failed (%s), retrying plain start-server", e)
            try:
                output = self._run("start-server")
            except (subprocess.CalledProcessError, OSError) as e:
                raise self._failure("error starting server", e) from e
        self._log.debug("start-server output: %s", output)

    def root(self) -> None:
        """
        Restart adbd on the device with root permissions.

        Raises:
            ServerNotAvailable: If the command fails.
        """
        try:
            output = self._run("root")
        except (subprocess.CalledProcessError, OSError) as e:
            raise self._failure("error rooting server", e) from e
        self._log.debug("root output: %s", output)

    def install(self, apk_path: str) -> None:
        """
        Install a package on the emulator.

        Args:
            apk_path: Local path of the APK, passed to adb as-is.

        Raises:
            ServerNotAvailable: If the install fails.
        """
        try:
            output = self._run("-e", "install", apk_path)
        except (subprocess.CalledProcessError, OSError) as e:
            raise self._failure(f"error installing {apk_path}", e) from e
        self._log.debug("install output: %s", output)

    def _run(self, *args: str) -> str:
        self._log.debug("Running: %s", format_command(self.adb_path, args))
        return output_text(self._config.environment.combined_output(self.adb_path, *args))

    def _failure(self, message: str, error: Exception) -> ServerNotAvailable:
        output = output_text(getattr(error, "output", None))
        return ServerNotAvailable(f"{message}: {error}\noutput:\n{output}", output=output)


def round_trip_single_response(server: AdbServer, request: bytes) -> bytes:
    """Dial the server, send one request, and close the connection."""
    conn = server.dial()
    try:
        return conn.round_trip(request)
    finally:
        conn.close()
