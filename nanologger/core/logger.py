"""
Main Logger class - synchronous fan-out logger
"""

from __future__ import annotations
from datetime import datetime
from typing import Optional, Sequence, Tuple
import logging
import threading

from nanologger.core.log_level import LogLevel
from nanologger.core.log_entry import LogEntry
from nanologger.core.logger_config import LoggerConfig
from nanologger.filters.module_filter import ModuleFilter
from nanologger.writers.base_output import LogOutput


class Logger:
    """
    Process-wide logger.

    The outputs and options are fixed at construction; only the global
    level can change afterwards.
    """

    def __init__(self, config: Optional[LoggerConfig] = None, outputs: Sequence[LogOutput] = ()):
        self._config = config or LoggerConfig.default()
        # Replaced whole by set_level(), never mutated in place
        self._level = self._config.level
        self._filter = ModuleFilter(self._config.module_allow, self._config.module_deny)
        if not outputs:
            outputs = [LogOutput.term(self._config.level)]
        self._outputs: Tuple[LogOutput, ...] = tuple(outputs)
        self._stdlib_logger: Optional[logging.Logger] = None

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def outputs(self) -> Tuple[LogOutput, ...]:
        return self._outputs

    @property
    def module_filter(self) -> ModuleFilter:
        return self._filter

    @property
    def level(self) -> LogLevel:
        """Current global level."""
        return self._level

    def set_level(self, level: LogLevel) -> None:
        """
        Change the global level.

        Output thresholds are left untouched. When the stdlib bridge is
        installed its logger level follows along.
        """
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        self._level = level
        if self._stdlib_logger is not None:
            self._stdlib_logger.setLevel(level.to_logging_level())

    def bind_stdlib_logger(self, stdlib_logger: logging.Logger) -> None:
        """Keep a stdlib logger's level in step with this logger."""
        self._stdlib_logger = stdlib_logger
        stdlib_logger.setLevel(self._level.to_logging_level())

    def is_enabled(self, level: LogLevel, module_path: str) -> bool:
        """Apply the global level gate and the module filter."""
        if level < self._level:
            return False
        return self._filter.matches(module_path)

    def log(
        self,
        level: LogLevel,
        message: str,
        module_path: str = "",
        file_name: str = "",
        line_number: int = 0,
    ) -> None:
        """
        Dispatch one event to every output.

        Args:
            level: Event level
            message: Fully formatted message text
            module_path: Calling module, checked against the module filter
            file_name: Calling file, shown when source locations are on
            line_number: Calling line, shown when source locations are on
        """
        # Cheap gates first: nothing is captured for dropped events
        if level < self._level:
            return
        if not self._filter.matches(module_path):
            return

        entry = self._capture(level, message, module_path, file_name, line_number)
        for output in self._outputs:
            output.emit(entry)

    def _capture(
        self,
        level: LogLevel,
        message: str,
        module_path: str,
        file_name: str,
        line_number: int,
    ) -> LogEntry:
        """Build the entry with the context enabled in the config."""
        config = self._config
        return LogEntry(
            level=level,
            message=message,
            module_path=module_path,
            file_name=file_name,
            line_number=line_number,
            timestamp=self._current_timestamp() if config.timestamps else None,
            thread_info=current_thread_info() if config.thread_info else None,
            show_location=config.source_location,
        )

    def _current_timestamp(self) -> str:
        fmt = self._config.timestamp_format
        stamp = datetime.now().strftime(fmt)
        if fmt.endswith("%f"):
            stamp = stamp[:-3]  # microseconds -> milliseconds
        return stamp

    def __repr__(self) -> str:
        return f"Logger(level={self._level.name}, outputs={list(self._outputs)})"


def current_thread_info() -> str:
    """Name of the calling thread, or its identifier when unnamed."""
    thread = threading.current_thread()
    if thread.name:
        return thread.name
    return f"ThreadId({threading.get_ident()})"
