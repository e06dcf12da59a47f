"""Integrations with other logging conventions"""

from nanologger.integrations.stdlib_logging import NanologgerHandler, install_logging_bridge

__all__ = ["NanologgerHandler", "install_logging_bridge"]
