"""
Exceptions raised by hxx.
"""


class HxxError(Exception):
    """Base class for every failure reported by the command line tool."""


class InvalidConfig(HxxError, ValueError):
    """A column or group size outside the accepted range."""

    def __init__(self, name: str, value: int, low: int, high: int):
        self.name = name
        self.value = value
        super().__init__(f"invalid value for {name}: {value} (must be between {low} and {high})")


class IoFailure(HxxError, OSError):
    """Reading the input or writing the output failed."""


class MalformedInput(HxxError, ValueError):
    """A line of a hex dump could not be turned back into bytes."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")
