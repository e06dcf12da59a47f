"""
Logger configuration management
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Mapping

from nanologger.core.exceptions import ParseLevelError
from nanologger.core.log_level import LogLevel

# Environment variable consulted for the default level
LEVEL_ENV_VAR = "NANOLOG_LEVEL"


def level_from_env(
    environ: Optional[Mapping[str, str]] = None,
    default: LogLevel = LogLevel.INFO,
) -> LogLevel:
    """
    Resolve the default level from NANOLOG_LEVEL.

    Args:
        environ: Environment mapping (default: os.environ)
        default: Level used when the variable is unset or unparsable

    Returns:
        Parsed level or default
    """
    if environ is None:
        environ = os.environ
    value = environ.get(LEVEL_ENV_VAR)
    if value is None:
        return default
    try:
        return LogLevel.parse(value)
    except ParseLevelError:
        return default


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Everything here is fixed once the logger is built, except the level,
    which the logger copies and lets callers change at runtime.
    """

    # Basic settings
    level: LogLevel = LogLevel.INFO

    # Context segments
    timestamps: bool = False
    source_location: bool = False
    thread_info: bool = False

    # Module filter
    module_allow: List[str] = field(default_factory=list)
    module_deny: List[str] = field(default_factory=list)

    # Format settings
    timestamp_format: str = "%H:%M:%S.%f"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        for name in ("module_allow", "module_deny"):
            value = getattr(self, name)
            if isinstance(value, str):
                raise TypeError(f"{name} must be a list of strings, not a string")
            value = list(value)
            if not all(isinstance(item, str) for item in value):
                raise TypeError(f"{name} entries must be strings")
            setattr(self, name, value)
        if not self.timestamp_format:
            raise ValueError("timestamp_format cannot be empty")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration, honoring NANOLOG_LEVEL."""
        return cls(level=level_from_env())

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level=LogLevel.TRACE,
            timestamps=True,
            source_location=True,
            thread_info=True,
        )
