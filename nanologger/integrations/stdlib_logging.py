"""
Bridge from the standard logging module

Third-party code that logs through ``logging.getLogger(...)`` is routed into
the same dispatch path as nanologger's own call sites. The stdlib logger
name plays the role of the module path for the module filter.
"""

import logging
import os
from typing import Optional

from nanologger.core.log_level import LogLevel
from nanologger.core.logger import Logger
from nanologger.core.registry import get_logger


class NanologgerHandler(logging.Handler):
    """
    logging.Handler that forwards records to a nanologger Logger.

    When no logger is given the process-wide one is looked up per record, so
    the handler may be attached before init(); records are dropped until then.
    """

    def __init__(self, logger: Optional[Logger] = None):
        super().__init__(level=logging.NOTSET)
        self._logger = logger

    @property
    def target(self) -> Optional[Logger]:
        if self._logger is not None:
            return self._logger
        return get_logger()

    def enabled(self, levelno: int, name: str) -> bool:
        """Would a record at this level from this logger name be dispatched?"""
        logger = self.target
        if logger is None:
            return False
        return logger.is_enabled(LogLevel.from_logging_level(levelno), name)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.enabled(record.levelno, record.name):
            return False
        return super().filter(record)

    def emit(self, record: logging.LogRecord) -> None:
        logger = self.target
        if logger is None:
            return
        try:
            message = record.getMessage()
        except Exception:
            self.handleError(record)
            return
        logger.log(
            LogLevel.from_logging_level(record.levelno),
            message,
            record.name,
            os.path.basename(record.pathname) if record.pathname else "",
            record.lineno or 0,
        )


def install_logging_bridge(
    logger: Logger,
    stdlib_logger: Optional[logging.Logger] = None,
) -> NanologgerHandler:
    """
    Attach a NanologgerHandler to a stdlib logger (the root logger by default).

    The stdlib logger's level is kept in step with ``logger``'s global level,
    including later set_level() calls. Existing NanologgerHandlers on that
    logger are replaced.

    Returns:
        The installed handler
    """
    if stdlib_logger is None:
        stdlib_logger = logging.getLogger()
    for existing in list(stdlib_logger.handlers):
        if isinstance(existing, NanologgerHandler):
            stdlib_logger.removeHandler(existing)
    handler = NanologgerHandler(logger)
    stdlib_logger.addHandler(handler)
    logger.bind_stdlib_logger(stdlib_logger)
    return handler
