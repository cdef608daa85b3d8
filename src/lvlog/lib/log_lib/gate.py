"""
Level gates — the public logging entry points.

Two gates must both pass before anything is computed or written:

1. Build gate: the level's ``log-*`` feature (see features.py). Checked
   once, at import; a disabled level's entry point is a no-op.
2. Run gate: ``level >= config.log_level``. Checked on every call.

Usage::

    from lvlog.lib.log_lib import gate

    gate.warn(config, "retrying {host} in {delay}s", host=host, delay=2)
    gate.trace_bytes(config, packet, label="rx")

INFO goes to stdout; every other level goes to stderr.
"""

import sys

from .clock import new_time_string
from .features import Features, current
from .formatting import format_log_message_prefix
from .hexdump import highlighted_hex
from .levels import Level
from .record import Log
from .terminal import find_tty_and_update_from


def stream_for(level: Level):
    """stdout for INFO, stderr for everything else."""
    return sys.stdout if level is Level.INFO else sys.stderr


def dispatch(config, text: str, level: Level) -> None:
    """Render and write one record, with no level check."""
    config = find_tty_and_update_from(config)
    formatted_message = format(Log(config, text, level))
    print(formatted_message, file=stream_for(level))


def _format_message(message, args, kwargs) -> str:
    if args or kwargs:
        return message.format(*args, **kwargs)
    return str(message)


def _disabled(level: Level):
    def disabled(config, message, *args, **kwargs):
        return None

    disabled.__name__ = level.name.lower()
    disabled.__doc__ = f"{level} output is not built in (no-op)."
    disabled.compiled = False
    return disabled


def make_gate(level: Level, features: Features = None):
    """Build the entry point for one level.

    Args:
        level: Level the entry point emits at
        features: Build features; defaults to the process feature set

    Returns:
        ``fn(config, message, *args, **kwargs)``. Placeholders in message
        are filled with str.format only once both gates pass.
    """
    features = features or current()
    if not features.level_enabled(level):
        return _disabled(level)

    def gate(config, message, *args, **kwargs):
        if level >= config.log_level:
            dispatch(config, _format_message(message, args, kwargs), level)

    gate.__name__ = level.name.lower()
    gate.__doc__ = f"Emit at {level} when config.log_level allows it."
    gate.compiled = True
    return gate


error = make_gate(Level.ERROR)
warn = make_gate(Level.WARN)
info = make_gate(Level.INFO)
verb = make_gate(Level.VERB)
debug = make_gate(Level.DEBUG)
trace = make_gate(Level.TRACE)

GATES = {
    Level.ERROR: error,
    Level.WARN: warn,
    Level.INFO: info,
    Level.VERB: verb,
    Level.DEBUG: debug,
    Level.TRACE: trace,
}


def make_init(features: Features = None):
    """Build the ``init`` entry point: startup tracing, no config needed.

    Writes a plain ``Init`` line to stderr with no run-time gate. Exists
    only when ``log-trace`` is built in.
    """
    features = features or current()
    if not features.level_enabled(Level.TRACE):
        def init(message, *args, **kwargs):
            return None
        init.compiled = False
        return init

    def init(message, *args, **kwargs):
        text = _format_message(message, args, kwargs)
        prefix = format_log_message_prefix(new_time_string(), "Init", False)
        print(f"{prefix}{text}", file=sys.stderr)

    init.compiled = True
    return init


def make_trace_bytes(features: Features = None):
    """Build ``trace_bytes(config, data, index_offset=0, label="")``.

    Emits one TRACE record whose message is ``label`` followed by the
    highlighted hex dump of ``data``.
    """
    features = features or current()
    if not features.level_enabled(Level.TRACE):
        def trace_bytes(config, data, index_offset=0, label=""):
            return None
        trace_bytes.compiled = False
        return trace_bytes

    def trace_bytes(config, data, index_offset=0, label=""):
        if Level.TRACE >= config.log_level:
            config = find_tty_and_update_from(config)
            dump = highlighted_hex(data, index_offset, config)
            dispatch(config, f"{label}{dump}", Level.TRACE)

    trace_bytes.compiled = True
    return trace_bytes


init = make_init()
trace_bytes = make_trace_bytes()
