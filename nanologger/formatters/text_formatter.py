"""
Text formatter producing the standard single-line layout

    [timestamp ]["(" thread ") "]TAG [ "[" file ":" line "] " ]message
"""

from typing import Optional, Tuple

from nanologger.core.log_entry import LogEntry
from nanologger.core.log_level import LogLevel
from nanologger.formatters.base_formatter import BaseFormatter
from nanologger.formatters.colors import paint


def format_message(
    level: LogLevel,
    message: str,
    use_color: bool,
    timestamp: Optional[str] = None,
    source_location: Optional[Tuple[str, int]] = None,
    thread_info: Optional[str] = None,
) -> str:
    """
    Build one formatted log line.

    Args:
        level: Event level, rendered as its fixed-width tag
        message: Already formatted message text
        use_color: Wrap the tag (and only the tag) in a bold level color
        timestamp: Leading timestamp segment
        source_location: (file, line) pair rendered as "[file:line] "
        thread_info: Thread identity rendered as "(name) "

    Returns:
        Newline-terminated line. Absent segments leave no separator behind.

    Example:
        >>> format_message(LogLevel.INFO, "ok", False, timestamp="14:30:05")
        '14:30:05 [INFO]  ok\\n'
    """
    tag = level.tag
    if use_color:
        tag = paint(tag, level.color, bold=True)

    parts = []
    if timestamp is not None:
        parts.append(f"{timestamp} ")
    if thread_info is not None:
        parts.append(f"({thread_info}) ")
    parts.append(f"{tag} ")
    if source_location is not None:
        file_name, line = source_location
        parts.append(f"[{file_name}:{line}] ")
    parts.append(message)
    parts.append("\n")
    return "".join(parts)


class TextFormatter(BaseFormatter):
    """Format log entries with format_message()."""

    def format(self, entry: LogEntry, use_color: bool = False) -> str:
        """
        Format log entry as a single line.

        Args:
            entry: Log entry with its captured context
            use_color: Whether the level tag is colored

        Returns:
            Formatted line
        """
        return format_message(
            entry.level,
            entry.message,
            use_color,
            timestamp=entry.timestamp,
            source_location=entry.source_location,
            thread_info=entry.thread_info,
        )

    def __repr__(self) -> str:
        """String representation."""
        return "TextFormatter()"
