# ADB Host Access Core Modules

from .adb_models import ADBError, ServerNotAvailable
from .config import ADB_EXECUTABLE_NAME, ADB_PORT, DEFAULT_HOST, ServerConfig
from .device_descriptor import (
    DescriptorKind,
    DeviceDescriptor,
    any_device,
    any_usb_device,
    any_local_device,
    device_with_serial,
)
from .dialer import Connection, Dialer, TcpConnection, TcpDialer
from .environment import LocalProcessEnvironment, ProcessEnvironment
from .server import AdbServer, round_trip_single_response
