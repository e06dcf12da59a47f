"""
ANSI color support

Decorates text with ANSI colors and attributes and decides whether a stream
should receive colored output at all.
"""

import os
import sys
import threading
from typing import Dict, Iterable, Optional, TextIO

RESET = "\033[0m"
BOLD = "1"

# SGR foreground codes; background codes are these plus 10
COLOR_CODES = {
    "black": "30",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
    "white": "37",
}

# SGR text attributes
STYLE_CODES = {
    "bold": BOLD,
    "dim": "2",
    "italic": "3",
    "underline": "4",
    "reverse": "7",
    "strikethrough": "9",
}

_override_lock = threading.Lock()
_colors_override: Optional[bool] = None


def _lookup(table: Dict[str, str], name: str, kind: str) -> str:
    try:
        return table[name]
    except KeyError:
        raise ValueError(f"Unknown {kind}: {name}") from None


def paint(
    text: str,
    color: Optional[str] = None,
    bold: bool = True,
    styles: Iterable[str] = (),
    background: Optional[str] = None,
) -> str:
    """
    Wrap text in an ANSI SGR sequence unconditionally.

    Args:
        text: Text to decorate
        color: Foreground color name from COLOR_CODES
        bold: Also apply bold weight
        styles: Extra attributes from STYLE_CODES, e.g. ("dim", "underline")
        background: Background color name from COLOR_CODES

    Returns:
        Decorated text, e.g. "\\033[1;31m[ERROR]\\033[0m". Text is returned
        unchanged when nothing is requested.

    Raises:
        ValueError: If a color or style name is unknown
    """
    if isinstance(styles, str):
        styles = (styles,)
    params = [BOLD] if bold else []
    for name in styles:
        code = _lookup(STYLE_CODES, name, "style")
        if code not in params:
            params.append(code)
    if color is not None:
        params.append(_lookup(COLOR_CODES, color, "color"))
    if background is not None:
        params.append(str(int(_lookup(COLOR_CODES, background, "color")) + 10))
    if not params:
        return text
    return f"\033[{';'.join(params)}m{text}{RESET}"


def set_colors_override(enabled: bool) -> None:
    """Force colors on or off for every stream until cleared."""
    global _colors_override
    with _override_lock:
        _colors_override = enabled


def clear_colors_override() -> None:
    """Return to automatic detection."""
    global _colors_override
    with _override_lock:
        _colors_override = None


def colors_enabled(stream: Optional[TextIO] = None) -> bool:
    """
    Decide whether colored output should be written to a stream.

    An explicit override wins, then NO_COLOR, then TTY detection. The answer
    is computed on every call and never cached.
    """
    if _colors_override is not None:
        return _colors_override
    if os.environ.get("NO_COLOR"):
        return False
    if stream is None:
        stream = sys.stderr
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        # closed or detached stream
        return False


def style(
    text: str,
    color: Optional[str] = None,
    bold: bool = False,
    styles: Iterable[str] = (),
    background: Optional[str] = None,
) -> str:
    """
    Decorate message content for the terminal; plain text when uncolorable.

    Example:
        info("status: %s", style("OK", "green", bold=True))
        info("%s", style("note", styles=("dim", "underline"), background="blue"))
    """
    if not colors_enabled(sys.stderr):
        return text
    return paint(text, color, bold=bold, styles=styles, background=background)
