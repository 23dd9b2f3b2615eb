"""
Shared Utilities Module
Common helpers used across the ADB host access layer.
"""

from typing import Optional, Union


def output_text(output: Optional[Union[bytes, str]]) -> str:
    """Decode captured process output and trim surrounding whitespace."""
    if not output:
        return ""
    if isinstance(output, bytes):
        output = output.decode("utf-8", errors="replace")
    return output.strip()


def format_command(name: str, args: tuple[str, ...]) -> str:
    """Render an argv for log messages."""
    return " ".join((name,) + tuple(args))
