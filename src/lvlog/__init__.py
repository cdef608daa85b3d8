"""lvlog — leveled console logging.

One formatted line per message (``[<time> <LEVEL>]: <message>``),
ANSI color only when every output stream is a terminal, and annotated
hex dumps for trace-level byte inspection.
"""

from lvlog._version import __version__, __app_name__
from lvlog.config import Config, resolve_config
from lvlog.lib.log_lib import (
    Level, Log, error, warn, info, verb, debug, trace, init, trace_bytes,
    highlighted_hex, traced,
)

__all__ = [
    "__version__", "__app_name__",
    "Config", "resolve_config",
    "Level", "Log",
    "error", "warn", "info", "verb", "debug", "trace", "init", "trace_bytes",
    "highlighted_hex", "traced",
]
