"""
Core module for logger system

This module contains the fundamental classes:
- LogLevel: Log level enumeration
- LogEntry: Log entry with its captured context
- LoggerConfig: Configuration management
- Logger: Dispatching logger
- LoggerRegistry: Set-once holder of the process-wide logger
- LoggerBuilder: Builder pattern for logger construction
"""

from nanologger.core.exceptions import InitError, ParseLevelError
from nanologger.core.log_level import LogLevel
from nanologger.core.log_entry import LogEntry
from nanologger.core.logger_config import LoggerConfig
from nanologger.core.logger import Logger
from nanologger.core.registry import LoggerRegistry
from nanologger.core.logger_builder import LoggerBuilder

__all__ = [
    "InitError",
    "ParseLevelError",
    "LogLevel",
    "LogEntry",
    "LoggerConfig",
    "Logger",
    "LoggerRegistry",
    "LoggerBuilder",
]
