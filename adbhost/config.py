"""
ADB Server Configuration
Defaults and construction-time settings for the ADB server connection.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .dialer import Dialer
    from .environment import ProcessEnvironment


ADB_EXECUTABLE_NAME = "adb"

# Default port the adb server listens on.
ADB_PORT = 5037

DEFAULT_HOST = "localhost"


@dataclass
class ServerConfig:
    """Configuration for connecting to (and launching) the adb server.

    Every field is optional. Unset fields are filled in by ``AdbServer``:
    the executable is searched for on PATH, the endpoint defaults to
    ``localhost:5037``, and the real TCP dialer and OS process environment
    are used.
    """

    # Path to the adb executable. If empty, PATH is searched.
    adb_path: Optional[str] = None

    # Host and port the adb server is listening on.
    host: str = ""
    port: int = 0

    dialer: Optional["Dialer"] = None
    environment: Optional["ProcessEnvironment"] = None
    logger: Optional[logging.Logger] = None
