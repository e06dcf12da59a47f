"""Terminal output with ANSI colors"""

import sys

from nanologger.core.log_entry import LogEntry
from nanologger.formatters.colors import colors_enabled
from nanologger.writers.base_output import LogOutput


class TermOutput(LogOutput):
    """Write logs to standard error, colored when it is a terminal."""

    def write(self, entry: LogEntry):
        """Write log entry to stderr."""
        # Resolved per write so redirection and capture take effect immediately
        stream = sys.stderr
        if stream is None:
            return
        msg = self.formatter.format(entry, use_color=colors_enabled(stream))
        stream.write(msg)
        stream.flush()
