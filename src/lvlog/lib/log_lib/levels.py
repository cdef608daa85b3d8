"""
Severity levels for leveled console output.

Six levels, most severe first:

    ERROR > WARN > INFO > VERB > DEBUG > TRACE
      0      1      2      3      4       5      (ordinal)

The ordinal is the declaration position, so the most severe level has
the smallest ordinal. Comparison operators compare SEVERITY, not the
ordinal. The emit rule is:

    message.level >= config.log_level  →  message is shown
"""

import functools
from enum import Enum
from typing import Optional, Tuple, Union

UNKNOWN_LEVEL = "Unknown log level provided"


@functools.total_ordering
class Level(Enum):
    """Ordered log severity. Default is WARN."""

    ERROR = 0
    WARN = 1
    INFO = 2
    VERB = 3
    DEBUG = 4
    TRACE = 5

    @property
    def ordinal(self) -> int:
        return self.value

    @classmethod
    def default(cls) -> "Level":
        return cls.WARN

    @classmethod
    def all_variants(cls) -> Tuple["Level", ...]:
        """Every level in declaration order (most severe first)."""
        return tuple(cls)

    @classmethod
    def from_ordinal(cls, n) -> Optional["Level"]:
        """Exact ordinal match, or None for anything out of range."""
        if not isinstance(n, int) or isinstance(n, bool):
            return None
        for level in cls:
            if n == level.value:
                return level
        return None

    @classmethod
    def from_name(cls, s) -> Optional["Level"]:
        """Case-insensitive exact name match, or None."""
        if not isinstance(s, str):
            return None
        wanted = s.lower()
        for level in cls:
            if level.name.lower() == wanted:
                return level
        return None

    @classmethod
    def parse(cls, value: Union[int, str]) -> "Level":
        """Convert an ordinal or a name, raising on unrecognised input.

        Args:
            value: Ordinal (int) or level name (str, any case)

        Returns:
            The matching Level

        Raises:
            ValueError: If value names no level
        """
        if isinstance(value, str):
            level = cls.from_name(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            level = cls.from_ordinal(value)
        else:
            level = None
        if level is None:
            raise ValueError(UNKNOWN_LEVEL)
        return level

    def __lt__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        # Larger ordinal = less severe
        return self.value > other.value

    def __str__(self):
        return self.name.capitalize()

    def __format__(self, format_spec):
        from .formatting import format_with_options
        return format_with_options(str(self), format_spec)
