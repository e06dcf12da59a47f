"""Writer output for arbitrary file-like destinations"""

import io
import threading
from typing import Optional

from nanologger.core.log_entry import LogEntry
from nanologger.core.log_level import LogLevel
from nanologger.writers.base_output import LogOutput


class WriterOutput(LogOutput):
    """Write plain log lines to any file-like object."""

    def __init__(
        self,
        level: LogLevel,
        destination,
        encoding: str = "utf-8",
        formatter=None,
        binary: Optional[bool] = None,
    ):
        """
        Initialize writer output.

        Args:
            level: Minimum level written to this destination
            destination: Object with a write() method, text or binary.
                The output owns it for the logger's lifetime.
            encoding: Encoding used when the destination is binary
            formatter: Log formatter (default: TextFormatter)
            binary: Write bytes (True) or str (False). Guessed from the
                destination type and its mode when omitted.
        """
        super().__init__(level, formatter)
        if not callable(getattr(destination, "write", None)):
            raise TypeError("destination must have a write() method")
        self.destination = destination
        self.encoding = encoding
        self._binary = _is_binary(destination) if binary is None else binary
        self._lock = threading.Lock()

    def write(self, entry: LogEntry):
        """Write log entry to the destination."""
        msg = self.formatter.format(entry, use_color=False)
        data = msg.encode(self.encoding) if self._binary else msg
        with self._lock:
            self.destination.write(data)
            flush = getattr(self.destination, "flush", None)
            if flush is not None:
                flush()


def _is_binary(destination) -> bool:
    """Guess whether a destination expects bytes rather than str."""
    if isinstance(destination, (io.RawIOBase, io.BufferedIOBase)):
        return True
    if isinstance(destination, io.TextIOBase):
        return False
    return "b" in getattr(destination, "mode", "")
