"""
Terminal color policy.

Color is allowed when forced, or when the configuration asks for it AND
both stdout and stderr are attached to a terminal. Redirecting either
stream turns color off for all output.
"""

import copy
import dataclasses
import sys


def _is_terminal(stream) -> bool:
    if stream is None:
        return False
    isatty = getattr(stream, 'isatty', None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def enable_terminal_colors(config) -> bool:
    """Decide whether ANSI color codes may be emitted for this config.

    Args:
        config: Any object exposing ``colored_output`` and
            ``colored_output_forced``

    Returns:
        True if color should be used
    """
    if config.colored_output_forced:
        return True

    return (config.colored_output
            and _is_terminal(sys.stdout)
            and _is_terminal(sys.stderr))


def find_tty_and_update_from(config):
    """Return config, or a copy with colored_output off when no terminal.

    The caller's object is never modified.
    """
    if enable_terminal_colors(config) or not config.colored_output:
        return config
    if hasattr(config, 'without_color'):
        return config.without_color()
    if dataclasses.is_dataclass(config):
        return dataclasses.replace(config, colored_output=False)
    # Opaque config: shallow copy with the flag cleared
    downgraded = copy.copy(config)
    downgraded.colored_output = False
    return downgraded
