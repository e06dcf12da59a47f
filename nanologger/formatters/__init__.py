"""
Log formatters module

Provides the line formatter and the ANSI color helpers it uses.
"""

from nanologger.formatters.base_formatter import BaseFormatter
from nanologger.formatters.text_formatter import TextFormatter, format_message
from nanologger.formatters.colors import (
    clear_colors_override,
    colors_enabled,
    paint,
    set_colors_override,
    style,
)

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "format_message",
    "clear_colors_override",
    "colors_enabled",
    "paint",
    "set_colors_override",
    "style",
]
