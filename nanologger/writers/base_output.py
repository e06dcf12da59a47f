"""
Base class for log outputs

An output is one destination with its own level threshold.
"""

from abc import ABC, abstractmethod
from typing import Optional

from nanologger.core.log_entry import LogEntry
from nanologger.core.log_level import LogLevel
from nanologger.formatters.base_formatter import BaseFormatter
from nanologger.formatters.text_formatter import TextFormatter


class LogOutput(ABC):
    """
    Abstract log output.

    The set of outputs is closed: TermOutput, WriterOutput and TestOutput.
    Use the factory methods below to create them.
    """

    def __init__(self, level: LogLevel, formatter: Optional[BaseFormatter] = None):
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        self.level = level
        self.formatter = formatter or TextFormatter()

    @staticmethod
    def term(level: LogLevel) -> "LogOutput":
        """Standard error, colored when it is a terminal."""
        from nanologger.writers.console_writer import TermOutput
        return TermOutput(level)

    @staticmethod
    def writer(level: LogLevel, destination, binary: Optional[bool] = None) -> "LogOutput":
        """Any file-like object, plain text."""
        from nanologger.writers.stream_writer import WriterOutput
        return WriterOutput(level, destination, binary=binary)

    @staticmethod
    def test(level: LogLevel) -> "LogOutput":
        """Standard output via print(), captured by pytest."""
        from nanologger.writers.capture_writer import TestOutput
        return TestOutput(level)

    def accepts(self, level: LogLevel) -> bool:
        """True if an event at this level passes the output's threshold."""
        return level >= self.level

    def emit(self, entry: LogEntry) -> None:
        """
        Write an entry if it passes this output's threshold.

        Failures raised by the destination never reach the caller.
        """
        if not self.accepts(entry.level):
            return
        try:
            self.write(entry)
        except Exception:
            # Logging must never alter the caller's control flow.
            pass

    @abstractmethod
    def write(self, entry: LogEntry) -> None:
        """Format and write an entry unconditionally."""
        pass

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(level={self.level.name})"
