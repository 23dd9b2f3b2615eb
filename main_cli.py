#!/usr/bin/env python3
"""
ADB Host - CLI Entry Point
"""

import argparse
import sys

from adbcli.app import build_descriptor, run_cli, setup_logging
from adbhost import ServerConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adbhost",
        description="ADB Host - start and reach the local adb server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s ping                     # Connect, starting the server if needed
  %(prog)s start -P 5038            # Start a server on another port
  %(prog)s install app.apk          # Install on the emulator
  %(prog)s encode -s emulator-5554  # Show request prefixes for a serial
        """
    )

    parser.add_argument('--adb', type=str, help='Path to the adb executable (default: search PATH)')
    parser.add_argument('-H', '--host', type=str, default='', help='adb server host (default: localhost)')
    parser.add_argument('-P', '--port', type=int, default=0, help='adb server port (default: 5037)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logging')
    parser.add_argument('--version', action='version', version='%(prog)s 1.0.0')

    subparsers = parser.add_subparsers(dest='command', required=True)
    subparsers.add_parser('ping', help='Connect to the adb server')
    subparsers.add_parser('start', help='Start the adb server')
    subparsers.add_parser('root', help='Restart adbd with root permissions')

    install = subparsers.add_parser('install', help='Install an APK on the emulator')
    install.add_argument('apk', type=str, help='Path of the APK to install')

    encode = subparsers.add_parser('encode', help='Print the request prefixes for a device')
    target = encode.add_mutually_exclusive_group()
    target.add_argument('-s', '--serial', type=str, help='Device serial')
    target.add_argument('-d', '--usb', action='store_true', help='Any USB device')
    target.add_argument('-e', '--local', action='store_true', help='Any local (TCP/emulator) device')

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    config = ServerConfig(adb_path=args.adb, host=args.host, port=args.port)
    descriptor = None
    if args.command == 'encode':
        descriptor = build_descriptor(args.serial, args.usb, args.local)

    try:
        code = run_cli(
            args.command,
            config=config,
            descriptor=descriptor,
            apk_path=getattr(args, 'apk', None),
        )
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        sys.exit(130)
    sys.exit(code)


if __name__ == '__main__':
    main()
