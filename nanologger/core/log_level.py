"""
Log level enumeration

Five severities ordered ERROR > WARN > INFO > DEBUG > TRACE.
"""

import logging
from enum import IntEnum
from typing import Dict, Optional

from nanologger.core.exceptions import ParseLevelError


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module, so a greater value
    is a more severe level and plain comparison operators express severity.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def parse(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ParseLevelError: If level_str is not a level name
        """
        level = LEVEL_FROM_NAME.get(level_str.upper())
        if level is None:
            raise ParseLevelError(level_str)
        return level

    from_string = parse

    def as_int(self) -> int:
        """Small integer code, 0 for ERROR through 4 for TRACE."""
        return _LEVEL_TO_CODE[self]

    @classmethod
    def from_int(cls, code: int) -> Optional["LogLevel"]:
        """Inverse of as_int(); None for codes outside 0..4."""
        return _CODE_TO_LEVEL.get(code)

    @property
    def tag(self) -> str:
        """Bracketed name padded so all five tags share one width."""
        return f"[{self.name}]".ljust(TAG_WIDTH)

    @property
    def color(self) -> str:
        """Name of the foreground color used for this level's tag."""
        return LEVEL_COLORS[self]

    def to_logging_level(self) -> int:
        """Equivalent level number for the stdlib logging module."""
        if self is LogLevel.TRACE:
            # stdlib has no TRACE; anything above NOTSET lets the record through
            return 1
        return int(self)

    @classmethod
    def from_logging_level(cls, levelno: int) -> "LogLevel":
        """Map a stdlib logging level number onto the closest LogLevel."""
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}

LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.ERROR: "red",
    LogLevel.WARN: "yellow",
    LogLevel.INFO: "green",
    LogLevel.DEBUG: "blue",
    LogLevel.TRACE: "magenta",
}

TAG_WIDTH = max(len(name) for name in LEVEL_NAMES.values()) + 2

_LEVEL_TO_CODE: Dict[LogLevel, int] = {
    LogLevel.ERROR: 0,
    LogLevel.WARN: 1,
    LogLevel.INFO: 2,
    LogLevel.DEBUG: 3,
    LogLevel.TRACE: 4,
}

_CODE_TO_LEVEL: Dict[int, LogLevel] = {v: k for k, v in _LEVEL_TO_CODE.items()}
