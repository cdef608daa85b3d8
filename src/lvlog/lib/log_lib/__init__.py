"""
log_lib — leveled console logging with ANSI-aware formatting.

A reusable output library providing:
- Ordered severity levels with name/ordinal conversion
- Terminal color policy (forced, or both streams on a terminal)
- ``[<time> <LEVEL>]: `` prefixes aligned in plain and color mode
- Width/alignment for any rendered value
- Highlighted hex dumps for trace-level byte inspection
- Build-time and run-time level gates
- Function tracing decorator

The configuration is consumed, not defined, here: any object exposing
``log_level``, ``colored_output`` and ``colored_output_forced`` works.

Public API:
    Level              — severity enum
    Log                — one formattable record
    error ... trace    — gated entry points
    init               — ungated startup trace line
    trace_bytes        — gated hex dump at TRACE
    highlighted_hex    — hex dump renderer
    enable_terminal_colors — color policy
    format_with_options — width/alignment for any value
    Features           — build feature set
    Clock              — explicit time context
    traced             — function tracing decorator
"""

from .levels import Level
from .color import Color, ColorizedText, colorize
from .features import Features, current as current_features
from .clock import Clock, PROCESS_CLOCK, new_time_string
from .terminal import enable_terminal_colors, find_tty_and_update_from
from .formatting import (
    Alignment, apply_width, format_with_options, format_log_message_prefix,
    log_level_to_string_colorized, num_digits,
)
from .record import Log
from .hexdump import highlighted_hex
from .gate import (
    dispatch, make_gate, error, warn, info, verb, debug, trace,
    init, trace_bytes, GATES,
)
from .tracing import traced

__all__ = [
    'Level',
    'Color', 'ColorizedText', 'colorize',
    'Features', 'current_features',
    'Clock', 'PROCESS_CLOCK', 'new_time_string',
    'enable_terminal_colors', 'find_tty_and_update_from',
    'Alignment', 'apply_width', 'format_with_options',
    'format_log_message_prefix', 'log_level_to_string_colorized', 'num_digits',
    'Log',
    'highlighted_hex',
    'dispatch', 'make_gate', 'error', 'warn', 'info', 'verb', 'debug', 'trace',
    'init', 'trace_bytes', 'GATES',
    'traced',
]
