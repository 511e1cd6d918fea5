"""Wall-clock time of day, ``00:00:00`` to ``23:59:59``.

Raw construction never wraps: ``ClockTime(24)`` is an error.  Crossing
midnight only happens through arithmetic with a :class:`Duration`,
which reduces the result modulo one day and discards whole elapsed
days.

Usage::

    start = ClockTime.parse("22:15:00")
    end = start + Duration(3)         # ClockTime('01:15:00')
    end - start                       # Duration('21:00:00'), no wraparound
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from chronoval._clock import ClockPort, SystemClock
from chronoval._duration import SECONDS_PER_HOUR, SECONDS_PER_MINUTE, Duration
from chronoval._errors import OutOfRangeError
from chronoval._parsing import format_int, split_hms

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

_BOUNDS = {"hour": 23, "minute": 59, "second": 59}


@dataclass(frozen=True, slots=True, order=True, repr=False)
class ClockTime:
    """Immutable time of day with whole-second resolution.

    Ordering is lexicographic on ``(hour, minute, second)``, which is
    the same as ordering by :attr:`total_seconds`.

    Raises:
        TypeError: A field is not an ``int``.
        OutOfRangeError: A field is negative or above its bound.
    """

    hour: int = 0
    minute: int = 0
    second: int = 0

    MIDNIGHT: ClassVar[ClockTime]

    def __post_init__(self) -> None:
        for name, upper in _BOUNDS.items():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be int, got {type(value).__name__}")
            if not 0 <= value <= upper:
                logger.debug(
                    "Rejected %s=%s outside [0, %d]",
                    name,
                    format_int(value),
                    upper,
                    extra={"context": {name: value}},
                )
                raise OutOfRangeError(
                    f"{name} must be in [0, {upper}], got {format_int(value)}",
                    value=value,
                )

    # -- alternate constructors ---------------------------------------------

    @classmethod
    def parse(cls, text: str) -> ClockTime:
        """Parse ``"HH:MM:SS"`` text.

        Each segment is whitespace-trimmed and must be unsigned digits;
        one or two digits per field are both fine, as are extra leading
        zeros.  A sign, even ``"+5"`` or ``"-0"``, makes the text
        malformed.  Any run of digits is well formed however large, so
        ``"256:00:00"`` is a range error rather than a format error.

        Raises:
            InvalidFormatError: Not three segments, or a segment is not
                a run of digits.
            OutOfRangeError: A parsed field is above its bound.
        """
        hour, minute, second = split_hms(text, signed=False)
        return cls(hour, minute, second)

    @classmethod
    def from_total_seconds(cls, total_seconds: int) -> ClockTime:
        """Build from seconds since midnight, ``0 <= total_seconds < 86400``."""
        if isinstance(total_seconds, bool) or not isinstance(total_seconds, int):
            raise TypeError(
                f"total_seconds must be int, got {type(total_seconds).__name__}"
            )
        if not 0 <= total_seconds < SECONDS_PER_DAY:
            raise OutOfRangeError(
                f"total_seconds must be in [0, {SECONDS_PER_DAY - 1}], "
                f"got {format_int(total_seconds)}",
                value=total_seconds,
            )
        hours, rest = divmod(total_seconds, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
        return cls(hours, minutes, seconds)

    @classmethod
    def now(cls, clock: ClockPort | None = None) -> ClockTime:
        """Current local time of day, truncated to whole seconds.

        Args:
            clock: Source of the wall-clock reading.  Defaults to
                :class:`~chronoval._clock.SystemClock`.
        """
        reading = (clock if clock is not None else SystemClock()).now()
        return cls(reading.hour, reading.minute, reading.second)

    # -- derived views ------------------------------------------------------

    @property
    def total_seconds(self) -> int:
        """Seconds since midnight."""
        return (
            self.hour * SECONDS_PER_HOUR
            + self.minute * SECONDS_PER_MINUTE
            + self.second
        )

    # -- arithmetic ---------------------------------------------------------

    def plus(self, duration: Duration) -> ClockTime:
        """Move forward by *duration*, wrapping past midnight."""
        if not isinstance(duration, Duration):
            raise TypeError(f"cannot add {type(duration).__name__} to ClockTime")
        return ClockTime.from_total_seconds(
            (self.total_seconds + duration.total_seconds) % SECONDS_PER_DAY
        )

    def minus(self, duration: Duration) -> ClockTime:
        """Move backward by *duration*, wrapping before midnight.

        Durations spanning several days never fail; only the resulting
        time of day is kept.
        """
        if not isinstance(duration, Duration):
            raise TypeError(f"cannot subtract {type(duration).__name__} from ClockTime")
        return ClockTime.from_total_seconds(
            (self.total_seconds - duration.total_seconds) % SECONDS_PER_DAY
        )

    def until(self, other: ClockTime) -> Duration:
        """Absolute straight-line distance to *other* (no wraparound)."""
        return Duration.between(self, other)

    def __add__(self, other: object) -> ClockTime:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> ClockTime | Duration:
        if isinstance(other, Duration):
            return self.minus(other)
        if isinstance(other, ClockTime):
            return other.until(self)
        return NotImplemented

    # -- comparison ---------------------------------------------------------

    def equals(self, other: object) -> bool:
        """True when *other* is a ClockTime denoting the same instant."""
        if not isinstance(other, ClockTime):
            return False
        return self.total_seconds == other.total_seconds

    def compare_to(self, other: ClockTime) -> int:
        """Return -1, 0 or 1 as this time is earlier, equal or later."""
        if not isinstance(other, ClockTime):
            raise TypeError(f"cannot compare ClockTime with {type(other).__name__}")
        return (self.total_seconds > other.total_seconds) - (
            self.total_seconds < other.total_seconds
        )

    # -- formatting ---------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def __repr__(self) -> str:
        return f"ClockTime({str(self)!r})"


ClockTime.MIDNIGHT = ClockTime()
