"""
Exceptions raised by the logger system

Only these two ever reach caller code; sink write failures are absorbed.
"""


class ParseLevelError(ValueError):
    """Raised when a string does not name a known log level."""

    def __init__(self, value: str):
        self.input = value
        super().__init__(f"invalid log level: '{value}'")


class InitError(RuntimeError):
    """Raised when the process-wide logger is initialized a second time."""

    def __init__(self):
        super().__init__("nanologger: logger already initialized")
