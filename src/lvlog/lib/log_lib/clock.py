"""
Timestamp rendering from an explicit time context.

The local UTC offset is captured once, when this module is imported, into
PROCESS_CLOCK. Callers that need a different offset build their own Clock
and hand it down through the configuration's ``clock`` attribute. Nothing
here touches process-wide time-zone state.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from .features import current

HUMAN_TIME_FORMAT = "%a, %d %b %Y %H:%M:%S"


@dataclass(frozen=True)
class Clock:
    """A fixed UTC offset used to render local timestamps."""
    offset: timezone = timezone.utc

    @classmethod
    def capture(cls) -> "Clock":
        """Snapshot the current local offset, falling back to UTC."""
        try:
            utcoffset = datetime.now().astimezone().utcoffset()
        except (OSError, OverflowError, ValueError):
            utcoffset = None
        if utcoffset is None:
            return cls()
        return cls(offset=timezone(utcoffset))

    @classmethod
    def fixed(cls, hours: float = 0) -> "Clock":
        return cls(offset=timezone(timedelta(hours=hours)))

    def now(self) -> datetime:
        return datetime.now(self.offset)


PROCESS_CLOCK = Clock.capture()


def clock_for(config) -> Clock:
    """The config's clock if it carries one, else the process clock."""
    return getattr(config, 'clock', None) or PROCESS_CLOCK


def new_time_string(clock: Optional[Clock] = None,
                    humantime: Optional[bool] = None) -> str:
    """Render the current time for a log prefix.

    Args:
        clock: Time context; defaults to PROCESS_CLOCK
        humantime: Override the ``humantime`` build feature

    Returns:
        ``Thu, 01 Jan 2024 00:00:00`` in the clock's offset, or an
        ISO-8601 UTC timestamp when human time is off
    """
    if humantime is None:
        humantime = current().humantime
    if not humantime:
        return datetime.now(timezone.utc).isoformat(timespec="microseconds")
    clock = clock or PROCESS_CLOCK
    return clock.now().strftime(HUMAN_TIME_FORMAT)
