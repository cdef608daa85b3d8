"""
Build features: which levels and capabilities exist at all.

Read once, at import, from LVLOG_FEATURES (comma-separated). Unset means
every feature is on. The gate module binds each level's entry point at
import time, so a level left out here has only a no-op entry point: its
arguments are never formatted and its configuration is never consulted.

    LVLOG_FEATURES=color,log-err,log-warn    # errors and warnings only

This is the run-time stand-in for compile-time exclusion: the level's
entry point still exists, but it does nothing.
"""

import os
from dataclasses import dataclass, field
from typing import FrozenSet

from .levels import Level

FEATURES_ENV = 'LVLOG_FEATURES'

LEVEL_FEATURES = {
    Level.ERROR: 'log-err',
    Level.WARN: 'log-warn',
    Level.INFO: 'log-info',
    Level.VERB: 'log-verb',
    Level.DEBUG: 'log-debug',
    Level.TRACE: 'log-trace',
}

KNOWN_FEATURES = frozenset({'color', 'humantime', *LEVEL_FEATURES.values()})


@dataclass(frozen=True)
class Features:
    """An immutable set of enabled build features."""
    enabled: FrozenSet[str] = field(default_factory=lambda: KNOWN_FEATURES)

    @classmethod
    def from_spec(cls, spec: str) -> "Features":
        """Parse a comma-separated feature list.

        Raises:
            ValueError: On an unknown feature name
        """
        names = {part.strip().lower() for part in spec.split(',') if part.strip()}
        unknown = names - KNOWN_FEATURES
        if unknown:
            raise ValueError(
                f"Unknown build feature(s): {', '.join(sorted(unknown))}"
            )
        return cls(enabled=frozenset(names))

    @classmethod
    def from_environ(cls, environ=None) -> "Features":
        environ = os.environ if environ is None else environ
        spec = environ.get(FEATURES_ENV)
        if spec is None:
            return cls()
        return cls.from_spec(spec)

    @property
    def color(self) -> bool:
        return 'color' in self.enabled

    @property
    def humantime(self) -> bool:
        return 'humantime' in self.enabled

    def level_enabled(self, level: Level) -> bool:
        return LEVEL_FEATURES[level] in self.enabled


FEATURES = Features.from_environ()


def current() -> Features:
    """The feature set this process was started with."""
    return FEATURES
