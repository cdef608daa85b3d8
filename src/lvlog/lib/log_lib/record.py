"""
Log — one formattable logging event.

A Log is built at the moment of emission, rendered once, and dropped.
It supports ``format()`` width/alignment so it can sit inside a wider
padded field:

    f"{Log(config, 'disk full', Level.ERROR):>80}"
"""

from .clock import clock_for, new_time_string
from .features import current
from .formatting import (
    format_log_message_prefix, format_with_options,
    log_level_to_string_colorized,
)
from .levels import Level
from .terminal import enable_terminal_colors


class Log:
    """Level + message + timestamp + configuration.

    Args:
        config: Object exposing log_level, colored_output,
            colored_output_forced (and optionally clock)
        text: Message text, already formatted
        level: Severity of this record
        time: Timestamp string; captured now when omitted
    """

    def __init__(self, config, text: str, level: Level, time: str = None):
        self.config = config
        self.message = str(text)
        self.level = level
        self.time = time if time is not None else new_time_string(clock_for(config))

    def use_color(self) -> bool:
        return current().color and enable_terminal_colors(self.config)

    def prefix(self) -> str:
        if self.use_color():
            level_text = log_level_to_string_colorized(self.level).text
            return format_log_message_prefix(self.time, level_text, True)
        return format_log_message_prefix(self.time, str(self.level), False)

    def render(self) -> str:
        return f"{self.prefix()}{self.message}"

    def __str__(self):
        return self.render()

    def __format__(self, format_spec):
        return format_with_options(self.render(), format_spec)

    def __repr__(self):
        return f"Log(level={self.level!s}, message={self.message!r}, time={self.time!r})"
