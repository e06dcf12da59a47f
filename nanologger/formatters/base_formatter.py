"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from nanologger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into complete, newline-terminated lines.
    """

    @abstractmethod
    def format(self, entry: LogEntry, use_color: bool = False) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format
            use_color: Whether ANSI color may be used

        Returns:
            Formatted line including the trailing newline
        """
        pass

    def __call__(self, entry: LogEntry, use_color: bool = False) -> str:
        """Allow formatters to be callable."""
        return self.format(entry, use_color)
