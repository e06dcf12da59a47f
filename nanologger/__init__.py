"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

nanologger - A minimal synchronous logger with leveled calls, colored
terminal output and per-output level filtering
"""

__version__ = "1.0.0"

from nanologger.core.exceptions import InitError, ParseLevelError
from nanologger.core.log_level import LogLevel
from nanologger.core.log_entry import LogEntry
from nanologger.core.logger_config import LoggerConfig
from nanologger.core.logger import Logger
from nanologger.core.registry import get_logger, log_with_context, set_level
from nanologger.core.logger_builder import LoggerBuilder, init
from nanologger.filters.module_filter import matches_module_filter
from nanologger.formatters.colors import style
from nanologger.writers import LogOutput, TermOutput, WriterOutput, TestOutput
from nanologger.api import log, error, warn, warning, info, debug, trace

# Import submodules (not all classes by default)
from nanologger import filters
from nanologger import formatters
from nanologger import integrations

__all__ = [
    "InitError",
    "ParseLevelError",
    "LogLevel",
    "LogEntry",
    "LoggerConfig",
    "Logger",
    "LoggerBuilder",
    "LogOutput",
    "TermOutput",
    "WriterOutput",
    "TestOutput",
    "init",
    "get_logger",
    "set_level",
    "log_with_context",
    "matches_module_filter",
    "style",
    "log",
    "error",
    "warn",
    "warning",
    "info",
    "debug",
    "trace",
    "filters",
    "formatters",
    "integrations",
]
