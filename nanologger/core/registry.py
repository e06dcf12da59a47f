"""
Process-wide logger registry

A set-once cell holding the Logger every call site dispatches to.
"""

import threading
from typing import Optional

from nanologger.core.exceptions import InitError
from nanologger.core.log_level import LogLevel
from nanologger.core.logger import Logger


class LoggerRegistry:
    """Holds at most one Logger; the first successful set() wins for good."""

    def __init__(self):
        self._lock = threading.Lock()
        self._logger: Optional[Logger] = None

    def set(self, logger: Logger) -> None:
        """
        Install the logger.

        Raises:
            InitError: If a logger is already installed. The installed
                logger is left untouched.
        """
        with self._lock:
            if self._logger is not None:
                raise InitError()
            self._logger = logger

    def get(self) -> Optional[Logger]:
        """Installed logger, or None before initialization."""
        return self._logger

    @property
    def initialized(self) -> bool:
        return self._logger is not None


_registry = LoggerRegistry()


def get_registry() -> LoggerRegistry:
    """The registry used by the module-level API."""
    return _registry


def get_logger() -> Optional[Logger]:
    """The process-wide logger, or None before init()."""
    return _registry.get()


def set_level(level: LogLevel) -> None:
    """Change the global level; silently ignored before init()."""
    logger = _registry.get()
    if logger is not None:
        logger.set_level(level)


def log_with_context(
    level: LogLevel,
    message: str,
    module_path: str,
    file_name: str,
    line_number: int,
) -> None:
    """
    Dispatch an event with explicit call-site metadata.

    Logging before init() is legal and does nothing.
    """
    logger = _registry.get()
    if logger is None:
        return
    logger.log(level, message, module_path, file_name, line_number)
