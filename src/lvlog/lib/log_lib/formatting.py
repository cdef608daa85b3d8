"""
Line formatting: the message prefix and generic width alignment.

Prefix layout:

    [<time> <LEVEL>]: <message>

The level field is padded to 5 columns for plain text and to 14 for
colorized text. 14 is 5 visible columns plus the fixed 9-character
escape wrapper produced by color.colorize(), so both modes line up on
screen.
"""

import re
from enum import Enum
from typing import Optional

from .color import Color, ColorizedText, colorize
from .levels import Level

PLAIN_LEVEL_WIDTH = 5
COLOR_LEVEL_WIDTH = 14

LEVEL_COLORS = {
    Level.ERROR: Color.RED,
    Level.WARN: Color.YELLOW,
    Level.INFO: Color.GREEN,
    Level.VERB: Color.MAGENTA,
    Level.DEBUG: Color.BLUE,
    Level.TRACE: Color.CYAN,
}

# [[fill]align][width]; fill is accepted but padding is always spaces
_FORMAT_SPEC = re.compile(r'^(?:.?(?P<align>[<>^]))?(?P<width>\d+)?$', re.DOTALL)


class Alignment(Enum):
    LEFT = '<'
    RIGHT = '>'
    CENTER = '^'

    @classmethod
    def from_name(cls, name: str) -> Optional["Alignment"]:
        for alignment in cls:
            if alignment.name.lower() == name.lower():
                return alignment
        return None


def format_log_message_prefix(time: str, level: str,
                              contains_ansi_color: bool) -> str:
    """Build the ``[<time> <level>]: `` prefix.

    Args:
        time: Timestamp string
        level: Level text, plain or already colorized
        contains_ansi_color: True if ``level`` carries escape codes

    Returns:
        The prefix, ending in ``]: ``
    """
    width = COLOR_LEVEL_WIDTH if contains_ansi_color else PLAIN_LEVEL_WIDTH
    return f"[{time} {level:<{width}}]: "


def log_level_to_string_colorized(level: Level) -> ColorizedText:
    """Level name wrapped in that level's color."""
    return colorize(str(level), LEVEL_COLORS[level])


def apply_width(value, width: Optional[int] = None,
                alignment: Alignment = Alignment.LEFT) -> str:
    """Pad a rendered value to ``width`` columns. Never truncates.

    With no width the value's str() is returned unchanged.
    """
    text = str(value)
    if width is None:
        return text
    return f"{text:{alignment.value}{width}}"


def format_with_options(value, format_spec: str) -> str:
    """Apply a ``format()`` width/alignment spec to any displayable value.

    Supports ``[[fill]align][width]``. Alignment defaults to left.

    Raises:
        ValueError: If the spec carries anything else (precision, type, ...)
    """
    if not format_spec:
        return str(value)
    match = _FORMAT_SPEC.match(format_spec)
    if match is None:
        raise ValueError(f"Invalid format specifier '{format_spec}'")
    width = match.group('width')
    if width is None:
        return str(value)
    align = match.group('align') or Alignment.LEFT.value
    return apply_width(value, int(width), Alignment(align))


def num_digits(n: int) -> int:
    """Number of decimal digits in a non-negative integer (0 has 1)."""
    return len(str(n))
