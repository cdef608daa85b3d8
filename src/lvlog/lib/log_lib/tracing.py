"""
Function tracing decorator.

Routes call tracing through the TRACE gate, so it obeys both the build
feature and the configured threshold like any other trace output.
"""

import functools
import inspect
from pathlib import Path

from . import gate
from .levels import Level


def _short_repr(value) -> str:
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    if isinstance(value, (bytes, bytearray)) and len(value) > 16:
        return f"<{len(value)} bytes>"
    return repr(value)


def traced(config=None):
    """Decorator factory tracing entry, exit and exceptions at TRACE.

    Args:
        config: Configuration to trace with. None resolves one from the
            environment on every call.

    Usage::

        @traced(config)
        def parse_frame(buf): ...
    """
    def decorator(func):
        module = inspect.getmodule(func)
        module_name = module.__name__ if module else "unknown"
        func_name = func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            cfg = config
            if cfg is None:
                # Lazy import to avoid circular dependency
                from lvlog.config import resolve_config
                cfg = resolve_config()

            if not gate.trace.compiled or Level.TRACE < cfg.log_level:
                return func(*args, **kwargs)

            args_repr = [_short_repr(arg) for arg in args]
            args_repr.extend(f"{key}={_short_repr(value)}"
                             for key, value in kwargs.items())
            args_str = ', '.join(args_repr)

            gate.trace(cfg, ">> {mod}.{fn}({args})",
                       mod=module_name, fn=func_name, args=args_str)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                gate.trace(cfg, "!! {mod}.{fn} raised: {exc}: {msg}",
                           mod=module_name, fn=func_name,
                           exc=type(e).__name__, msg=str(e))
                raise

            if result is not None:
                gate.trace(cfg, "<< {mod}.{fn} returned: {val}",
                           mod=module_name, fn=func_name,
                           val=_short_repr(result))
            return result

        return wrapper

    return decorator
