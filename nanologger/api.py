"""
Module-level logging calls

Each call captures its own call-site metadata (file name, line number and the
caller's module ``__name__``) from the calling frame, the same way the
standard logging module does.
"""

import os
import sys
from collections.abc import Mapping
from typing import Any, Tuple

from nanologger.core.log_level import LogLevel
from nanologger.core.registry import get_logger


def _caller(stacklevel: int) -> Tuple[str, str, int]:
    """(module path, file name, line) of the code that called the public function."""
    try:
        # 0 = _caller, 1 = _log, 2 = public function, 3 = its caller
        frame = sys._getframe(stacklevel + 2)
    except ValueError:
        return "", "", 0
    module_path = frame.f_globals.get("__name__", "")
    return module_path, os.path.basename(frame.f_code.co_filename), frame.f_lineno


def render_message(msg: Any, args: Tuple[Any, ...]) -> str:
    """
    Apply %-style arguments the way logging.LogRecord.getMessage() does.

    A single non-empty mapping argument feeds "%(name)s" templates. A
    template that does not fit its arguments never raises; the raw template
    and the arguments are rendered side by side instead.
    """
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        message = str(msg)
        return message % args if args else message
    except Exception:
        try:
            return f"{msg} {args!r}"
        except Exception:
            return "<unformattable log message>"


def _log(level: LogLevel, msg: Any, args: Tuple[Any, ...], stacklevel: int) -> None:
    logger = get_logger()
    # Global gate before any frame inspection or message formatting
    if logger is None or level < logger.level:
        return
    module_path, file_name, line = _caller(stacklevel)
    if not logger.is_enabled(level, module_path):
        return
    message = render_message(msg, args)
    logger.log(level, message, module_path, file_name, line)


def log(level: LogLevel, msg: Any, *args: Any, stacklevel: int = 1) -> None:
    """
    Log ``msg % args`` at the given level.

    Args:
        level: Event level
        msg: Message or %-style template
        *args: Template arguments; msg is used verbatim when there are none
        stacklevel: Which frame to attribute the call to; 1 is the direct
            caller, as in the standard logging module
    """
    _log(level, msg, args, stacklevel)


def error(msg: Any, *args: Any, stacklevel: int = 1) -> None:
    """Log an ERROR message."""
    _log(LogLevel.ERROR, msg, args, stacklevel)


def warn(msg: Any, *args: Any, stacklevel: int = 1) -> None:
    """Log a WARN message."""
    _log(LogLevel.WARN, msg, args, stacklevel)


def info(msg: Any, *args: Any, stacklevel: int = 1) -> None:
    """Log an INFO message."""
    _log(LogLevel.INFO, msg, args, stacklevel)


def debug(msg: Any, *args: Any, stacklevel: int = 1) -> None:
    """Log a DEBUG message."""
    _log(LogLevel.DEBUG, msg, args, stacklevel)


def trace(msg: Any, *args: Any, stacklevel: int = 1) -> None:
    """Log a TRACE message."""
    _log(LogLevel.TRACE, msg, args, stacklevel)


warning = warn
