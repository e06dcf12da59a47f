"""Logger builder pattern"""

from typing import Iterable, List, Optional

from nanologger.core.exceptions import InitError
from nanologger.core.logger import Logger
from nanologger.core.logger_config import LoggerConfig, level_from_env
from nanologger.core.log_level import LogLevel
from nanologger.core.registry import LoggerRegistry, get_registry
from nanologger.writers.base_output import LogOutput


class LoggerBuilder:
    """Builder pattern for one-time construction of the global logger."""

    def __init__(self):
        self._level = level_from_env()
        self._timestamps = False
        self._source_location = False
        self._thread_info = False
        self._module_allow: List[str] = []
        self._module_deny: List[str] = []
        self._outputs: List[LogOutput] = []
        self._stdlib_logging = False
        self._consumed = False

    def level(self, level: LogLevel) -> "LoggerBuilder":
        """Set the global level."""
        self._level = level
        return self

    def get_level(self) -> LogLevel:
        """Level the logger will start with."""
        return self._level

    def timestamps(self, enabled: bool) -> "LoggerBuilder":
        """Prefix lines with the local time (HH:MM:SS.mmm)."""
        self._timestamps = enabled
        return self

    def source_location(self, enabled: bool) -> "LoggerBuilder":
        """Insert "[file:line] " before the message."""
        self._source_location = enabled
        return self

    def thread_info(self, enabled: bool) -> "LoggerBuilder":
        """Insert "(thread-name) " before the level tag."""
        self._thread_info = enabled
        return self

    def module_allow(self, modules: Iterable[str]) -> "LoggerBuilder":
        """
        Only log from modules whose path starts with one of these prefixes.

        Args:
            modules: Module path prefixes; replaces any earlier list

        Returns:
            Self for method chaining
        """
        self._module_allow = list(modules)
        return self

    def module_deny(self, modules: Iterable[str]) -> "LoggerBuilder":
        """
        Never log from modules whose path starts with one of these prefixes.

        Deny wins over allow when both match.
        """
        self._module_deny = list(modules)
        return self

    def add_output(self, output: LogOutput) -> "LoggerBuilder":
        """
        Add an output destination.

        Args:
            output: LogOutput.term(), LogOutput.writer() or LogOutput.test()

        Returns:
            Self for method chaining

        Example:
            (LoggerBuilder()
                .level(LogLevel.TRACE)
                .add_output(LogOutput.term(LogLevel.WARN))
                .add_output(LogOutput.writer(LogLevel.TRACE, open("app.log", "a")))
                .init())
        """
        if not isinstance(output, LogOutput):
            raise TypeError("output must be a LogOutput")
        self._outputs.append(output)
        return self

    def stdlib_logging(self, enabled: bool = True) -> "LoggerBuilder":
        """Route records from the stdlib logging module through this logger."""
        self._stdlib_logging = enabled
        return self

    def build_config(self) -> LoggerConfig:
        """Snapshot the accumulated options as a LoggerConfig."""
        return LoggerConfig(
            level=self._level,
            timestamps=self._timestamps,
            source_location=self._source_location,
            thread_info=self._thread_info,
            module_allow=list(self._module_allow),
            module_deny=list(self._module_deny),
        )

    def init(self, registry: Optional[LoggerRegistry] = None) -> Logger:
        """
        Build the logger and install it as the process-wide logger.

        With no outputs added, a single terminal output at the global level
        is used.

        Args:
            registry: Registry to install into (default: the global one)

        Returns:
            The installed logger

        Raises:
            InitError: If a logger is already installed or this builder has
                already been consumed
        """
        if self._consumed:
            raise InitError()
        self._consumed = True

        if registry is None:
            registry = get_registry()
        logger = Logger(self.build_config(), self._outputs)
        registry.set(logger)

        if self._stdlib_logging:
            from nanologger.integrations.stdlib_logging import install_logging_bridge
            install_logging_bridge(logger)

        return logger


def init() -> Logger:
    """Initialize with defaults: one terminal output, level from NANOLOG_LEVEL or INFO."""
    return LoggerBuilder().init()
