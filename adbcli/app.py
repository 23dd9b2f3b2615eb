"""
CLI Application Module
Command-line front end for the ADB host access layer.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from adbhost import ADBError, AdbServer, DeviceDescriptor, ServerConfig


console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Route library log records through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def build_descriptor(serial: Optional[str] = None, usb: bool = False, local: bool = False) -> DeviceDescriptor:
    """Pick a device descriptor the way adb's -s/-d/-e flags do."""
    if serial is not None:
        return DeviceDescriptor.with_serial(serial)
    if usb:
        return DeviceDescriptor.any_usb()
    if local:
        return DeviceDescriptor.any_local()
    return DeviceDescriptor.any()


def display_descriptor(descriptor: DeviceDescriptor):
    """Show both wire encodings of a descriptor."""
    table = Table(title="Device Descriptor", show_header=True, header_style="bold magenta")
    table.add_column("Form", style="cyan")
    table.add_column("Value", style="bold")

    table.add_row("Display", descriptor.describe())
    table.add_row("Host prefix", descriptor.encode_host_prefix())
    table.add_row("Transport", descriptor.encode_transport_descriptor())
    table.add_row("Transport request", descriptor.transport_request())

    console.print(table)


def connect_server(config: ServerConfig) -> Optional[AdbServer]:
    """Locate adb and report where the server is expected."""
    try:
        server = AdbServer(config)
    except ADBError as e:
        console.print(f"[bold red]ERROR:[/] {e}", style="red")
        return None

    console.print(f"[green][OK][/] adb found: [bold cyan]{server.adb_path}[/]")
    return server


def ping_server(server: AdbServer) -> bool:
    """Dial the server once, starting it if needed."""
    try:
        conn = server.dial()
    except ADBError as e:
        console.print(f"[bold red]ERROR:[/] {e}", style="red")
        return False

    conn.close()
    console.print(f"[green][OK][/] adb server reachable at [bold cyan]{server.address}[/]")
    return True


def run_command(server: AdbServer, command: str, apk_path: Optional[str] = None) -> bool:
    """Run start/root/install and print the outcome."""
    try:
        if command == "start":
            server.start()
            message = f"adb server running at {server.address}"
        elif command == "root":
            server.root()
            message = "adbd restarted as root"
        elif command == "install":
            server.install(apk_path)
            message = f"installed {apk_path}"
        else:
            raise ValueError(f"unknown command: {command}")
    except ADBError as e:
        console.print(f"[bold red]ERROR:[/] {e}", style="red")
        return False

    console.print(f"[green][OK][/] {message}")
    return True


def run_cli(
    command: str,
    config: Optional[ServerConfig] = None,
    descriptor: Optional[DeviceDescriptor] = None,
    apk_path: Optional[str] = None,
) -> int:
    """
    Main CLI entry point.

    Args:
        command: One of encode, ping, start, root, install.
        config: Server settings; defaults are used when omitted.
        descriptor: Device descriptor shown by the encode command.
        apk_path: Package path for the install command.

    Returns:
        Process exit code.
    """
    if command == "encode":
        display_descriptor(descriptor or DeviceDescriptor.any())
        return 0

    console.print(Panel.fit(
        "[bold cyan]ADB Host[/]\n[dim]adb server control[/]",
        border_style="cyan"
    ))

    server = connect_server(config or ServerConfig())
    if server is None:
        return 1

    if command == "ping":
        return 0 if ping_server(server) else 1

    return 0 if run_command(server, command, apk_path) else 1
