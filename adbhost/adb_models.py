"""
ADB Error Models Module
Exception types raised by the ADB host access layer.
"""


class ADBError(Exception):
    """Exception raised for ADB-related errors."""
    pass


class ServerNotAvailable(ADBError):
    """
    Raised when the ADB server cannot be located, started or reached.

    The underlying OS, process or dial error is chained as ``__cause__``.
    ``output`` holds the trimmed combined output of the failing adb
    invocation, or an empty string when no process was run.
    """

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.output = output
