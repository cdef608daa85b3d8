"""
Highlighted hex dump for trace-level byte inspection.

    [
                                      00 = 48 65 6c 6c 6f \\r \\n 57
                                      08 = 6f 72 6c 64

Eight bytes per line. Each line is indented by the visible width of a
TRACE prefix so the dump sits under the trace line that introduced it.
CR and LF are shown as ``\\r`` / ``\\n`` (yellow when color is on).
The opening bracket is decorative: no closing bracket is written, the
caller adds any terminator it wants.
"""

from typing import Iterable

from .clock import clock_for, new_time_string
from .color import Color, colorize
from .features import current
from .formatting import (
    format_log_message_prefix, log_level_to_string_colorized, num_digits,
)
from .levels import Level
from .terminal import enable_terminal_colors

BYTES_PER_LINE = 8
EOL_COLOR = Color.YELLOW
_EOL_ESCAPES = {
    0x0D: r'\r',
    0x0A: r'\n',
}


def write_formatted_eol_byte(byte: int, use_color: bool) -> str:
    """Two-digit lowercase hex, or an escape for CR/LF."""
    replacement = _EOL_ESCAPES.get(byte)
    if replacement is None:
        return f"{byte:02x}"
    if use_color:
        return colorize(replacement, EOL_COLOR).text
    return replacement


def trace_prefix_width(config, use_color: bool) -> int:
    """Visible width of the prefix a TRACE Log would print now."""
    time = new_time_string(clock_for(config))
    if use_color:
        colorized = log_level_to_string_colorized(Level.TRACE)
        prefix = format_log_message_prefix(time, colorized.text, True)
        return len(prefix) - colorized.color_code_length
    return len(format_log_message_prefix(time, str(Level.TRACE), False))


def highlighted_hex(data: Iterable[int], index_offset: int, config) -> str:
    """Render bytes as an index-annotated, line-wrapped hex dump.

    Args:
        data: Bytes (or any iterable of ints 0-255)
        index_offset: Index of the first byte, for continuing a prior dump
        config: Configuration consulted for color

    Returns:
        The dump, starting with ``[``; just ``[`` for empty input
    """
    data = bytes(data)
    if not data:
        return "["

    use_color = current().color and enable_terminal_colors(config)
    indent = " " * trace_prefix_width(config, use_color)
    digits = num_digits(max(index_offset + len(data) - 1, 0))
    output = ["["]

    for index, byte in enumerate(data):
        if index != 0:
            output.append(" ")
        if index % BYTES_PER_LINE == 0:
            output.append("\n")
            output.append(indent)
            output.append(f"{index + index_offset:0{digits}d} = ")
        output.append(write_formatted_eol_byte(byte, use_color))

    return "".join(output)
