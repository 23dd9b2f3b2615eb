"""
Device Descriptor Module
Selects which device an ADB host request is addressed to.

The adb host service accepts two different spellings for the same target:

    kind     host prefix            transport descriptor
    Any      host                   transport-any
    Usb      host-usb               transport-usb
    Local    host-local             transport-local
    Serial   host-Serial:<serial>   transport:<serial>

The host prefix is prepended to host-level requests (``host-usb:get-state``),
the transport descriptor is sent as ``host:<descriptor>`` to bind the
connection to a device.
"""

from dataclasses import dataclass
from enum import Enum


class DescriptorKind(Enum):
    """Class of device selection criterion."""
    ANY = "Any"
    SERIAL = "Serial"
    USB = "Usb"
    LOCAL = "Local"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DeviceDescriptor:
    """Immutable device selection criterion."""
    kind: DescriptorKind

    # Only used if kind is SERIAL.
    serial: str = ""

    @classmethod
    def any(cls) -> "DeviceDescriptor":
        return cls(DescriptorKind.ANY)

    @classmethod
    def any_usb(cls) -> "DeviceDescriptor":
        return cls(DescriptorKind.USB)

    @classmethod
    def any_local(cls) -> "DeviceDescriptor":
        return cls(DescriptorKind.LOCAL)

    @classmethod
    def with_serial(cls, serial: str) -> "DeviceDescriptor":
        return cls(DescriptorKind.SERIAL, serial)

    def describe(self) -> str:
        """Return the display form, e.g. ``Serial[emulator-5554]`` or ``Usb``."""
        if self.kind is DescriptorKind.SERIAL:
            return f"{self.kind}[{self.serial}]"
        return str(self.kind)

    def __str__(self) -> str:
        return self.describe()

    def encode_host_prefix(self) -> str:
        """
        Encode the host selector that prefixes host-level requests.

        Raises:
            AssertionError: If the kind is not one of the four known variants.
        """
        kind = self.kind
        if kind is DescriptorKind.ANY:
            return "host"
        elif kind is DescriptorKind.USB:
            return "host-usb"
        elif kind is DescriptorKind.LOCAL:
            return "host-local"
        elif kind is DescriptorKind.SERIAL:
            return f"host-Serial:{self.serial}"
        raise AssertionError(f"invalid device descriptor kind: {kind!r}")

    def encode_transport_descriptor(self) -> str:
        """
        Encode the token used in a ``host:transport*`` request.

        Raises:
            AssertionError: If the kind is not one of the four known variants.
        """
        kind = self.kind
        if kind is DescriptorKind.ANY:
            return "transport-any"
        elif kind is DescriptorKind.USB:
            return "transport-usb"
        elif kind is DescriptorKind.LOCAL:
            return "transport-local"
        elif kind is DescriptorKind.SERIAL:
            return f"transport:{self.serial}"
        raise AssertionError(f"invalid device descriptor kind: {kind!r}")

    def host_request(self, service: str) -> str:
        """Build a host-level request for this device, e.g. ``host-usb:get-state``."""
        return f"{self.encode_host_prefix()}:{service}"

    def transport_request(self) -> str:
        """Build the request that switches a connection to this device's transport."""
        return f"host:{self.encode_transport_descriptor()}"


def any_device() -> DeviceDescriptor:
    return DeviceDescriptor.any()


def any_usb_device() -> DeviceDescriptor:
    return DeviceDescriptor.any_usb()


def any_local_device() -> DeviceDescriptor:
    return DeviceDescriptor.any_local()


def device_with_serial(serial: str) -> DeviceDescriptor:
    """Target a single device by serial. The serial is passed through untouched."""
    return DeviceDescriptor.with_serial(serial)
