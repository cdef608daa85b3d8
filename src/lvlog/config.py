"""Configuration for lvlog.

Three-layer config resolution (highest priority wins):
  1. CLI flags — --log-level, -v/-Q, --no-color, --force-color
  2. Environment — LVLOG_LEVEL, LVLOG_COLOR, LVLOG_FORCE_COLOR, NO_COLOR
  3. Defaults — WARN, color on, not forced

The result is an immutable Config snapshot. log_lib only reads it; any
change (such as turning color off for a redirected stream) produces a
copy.
"""

import dataclasses
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from lvlog.lib.log_lib.clock import PROCESS_CLOCK, Clock
from lvlog.lib.log_lib.levels import Level


ENV_LEVEL = "LVLOG_LEVEL"
ENV_COLOR = "LVLOG_COLOR"
ENV_FORCE_COLOR = "LVLOG_FORCE_COLOR"
ENV_NO_COLOR = "NO_COLOR"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Config:
    """Settings consumed by log_lib for each emission."""
    log_level: Level = Level.WARN
    colored_output: bool = True
    colored_output_forced: bool = False
    clock: Clock = PROCESS_CLOCK

    def without_color(self) -> "Config":
        return dataclasses.replace(self, colored_output=False)

    def with_level(self, level: Level) -> "Config":
        return dataclasses.replace(self, log_level=level)


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------
def parse_bool(value) -> Optional[bool]:
    """Parse a yes/no style string. None for anything unrecognised."""
    if value is None:
        return None
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    return None


def parse_level(value, default: Level = None) -> Level:
    """Level from a name or ordinal string, falling back to default.

    Args:
        value: Level name ('debug'), ordinal ('4'), or None
        default: Fallback; Level.default() when omitted

    Returns:
        The parsed Level, or the fallback for unrecognised input
    """
    if default is None:
        default = Level.default()
    if value is None:
        return default
    if isinstance(value, Level):
        return value
    text = str(value).strip()
    if text.isdigit():
        level = Level.from_ordinal(int(text))
    else:
        level = Level.from_name(text)
    return level if level is not None else default


def shift_level(level: Level, verbose: int = 0, quiet: int = 0) -> Level:
    """Move toward TRACE by ``verbose`` steps and toward ERROR by ``quiet``.

    -v increments, -Q decrements. They compose: -vv -Q = one step louder.
    The result is clamped to ERROR..TRACE.
    """
    variants = Level.all_variants()
    ordinal = level.ordinal + (verbose or 0) - (quiet or 0)
    ordinal = max(0, min(len(variants) - 1, ordinal))
    return Level.from_ordinal(ordinal)


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def config_from_environ(environ: Mapping[str, str] = None) -> Config:
    """Layers 2 and 3: environment over defaults."""
    environ = os.environ if environ is None else environ

    log_level = parse_level(environ.get(ENV_LEVEL))

    colored_output = True
    if environ.get(ENV_NO_COLOR):
        # https://no-color.org: any non-empty value disables color
        colored_output = False
    env_color = parse_bool(environ.get(ENV_COLOR))
    if env_color is not None:
        colored_output = env_color

    forced = parse_bool(environ.get(ENV_FORCE_COLOR)) or False

    return Config(
        log_level=log_level,
        colored_output=colored_output,
        colored_output_forced=forced,
    )


def resolve_config(args=None, environ: Mapping[str, str] = None) -> Config:
    """Resolve a Config using three-layer precedence.

    Reads these attributes from ``args`` when present and not None:
    ``log_level``, ``verbose``, ``quiet``, ``no_color``, ``force_color``.
    -v/-Q shift whatever level the lower layers produced.

    Args:
        args: argparse namespace (or None)
        environ: Environment mapping; os.environ when omitted

    Returns:
        The resolved Config
    """
    config = config_from_environ(environ)
    if args is None:
        return config

    changes = {}

    cli_level = getattr(args, "log_level", None)
    level = parse_level(cli_level, default=config.log_level)
    level = shift_level(level,
                        verbose=getattr(args, "verbose", 0),
                        quiet=getattr(args, "quiet", 0))
    if level is not config.log_level:
        changes["log_level"] = level

    if getattr(args, "no_color", False):
        changes["colored_output"] = False
    if getattr(args, "force_color", False):
        changes["colored_output_forced"] = True

    return dataclasses.replace(config, **changes) if changes else config
