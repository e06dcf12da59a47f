"""
Log entry data structure

Holds one event together with the context captured for it at dispatch time.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from nanologger.core.log_level import LogLevel


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Context fields are None when the matching logger option is disabled;
    formatters omit the corresponding segment entirely in that case.
    """

    level: LogLevel
    message: str
    module_path: str = ""
    file_name: str = ""
    line_number: int = 0
    timestamp: Optional[str] = None
    thread_info: Optional[str] = None
    show_location: bool = False

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    @property
    def source_location(self) -> Optional[Tuple[str, int]]:
        """(file, line) pair when source locations are enabled."""
        if not self.show_location:
            return None
        return (self.file_name, self.line_number)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.level.tag} {self.message}"
