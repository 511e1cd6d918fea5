"""Non-negative elapsed time with no 24-hour wraparound.

The canonical state is a single ``total_seconds`` integer.  Hours,
minutes and seconds are views computed from it on every access, so a
Duration can never hold inconsistent fields.

Components passed to the constructor or found in a parsed string are
summed as-is: ``Duration(0, 75, 0)`` and ``Duration.parse("0:75:0")``
are both ``1:15:00``.  Only the *sign* is validated.

Usage::

    shift = Duration(8, 30)
    overtime = Duration.parse("1:45:00")
    total = shift + overtime          # Duration('10:15:00')
    week = total * 5                  # Duration('51:15:00')
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from chronoval._errors import InvalidArgumentError, InvalidOperationError
from chronoval._parsing import format_int, split_hms

if TYPE_CHECKING:
    from chronoval._clocktime import ClockTime

logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600


def _require_int(name: str, value: object) -> int:
    # bool is an int subclass and is rejected explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True, init=False, repr=False, order=True)
class Duration:
    """Immutable, non-negative elapsed time in whole seconds.

    Args:
        hours: Whole hours, unbounded.
        minutes: Whole minutes, may exceed 59.
        seconds: Whole seconds, may exceed 59.

    Raises:
        TypeError: A component is not an ``int``.
        InvalidArgumentError: A component is negative.
    """

    total_seconds: int

    ZERO: ClassVar[Duration]

    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        components = {
            "hours": _require_int("hours", hours),
            "minutes": _require_int("minutes", minutes),
            "seconds": _require_int("seconds", seconds),
        }
        for name, value in components.items():
            if value < 0:
                logger.debug(
                    "Rejected negative duration component %s=%s",
                    name,
                    format_int(value),
                    extra={"context": components},
                )
                raise InvalidArgumentError(
                    f"{name} must not be negative, got {format_int(value)}",
                    value=value,
                )
        object.__setattr__(
            self,
            "total_seconds",
            hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds,
        )

    # -- alternate constructors ---------------------------------------------

    @classmethod
    def from_total_seconds(cls, total_seconds: int) -> Duration:
        """Build a Duration directly from its canonical seconds count."""
        return cls(seconds=total_seconds)

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Parse ``"H:M:S"`` text.

        Segments are whitespace-trimmed and may carry a sign; each must
        be an integer.  A negative value is an argument error rather
        than a format error, since the text itself is well formed.

        Raises:
            InvalidFormatError: Not three segments, or a segment is not
                an integer.
            InvalidArgumentError: A parsed component is negative.
        """
        hours, minutes, seconds = split_hms(text, signed=True)
        return cls(hours, minutes, seconds)

    @classmethod
    def between(cls, start: ClockTime, end: ClockTime) -> Duration:
        """Absolute distance between two times of day.

        This is a straight-line difference with no midnight wraparound:
        ``between(23:00:00, 01:00:00)`` is ``22:00:00``, not 2 hours.
        """
        from chronoval._clocktime import ClockTime

        for name, value in (("start", start), ("end", end)):
            if not isinstance(value, ClockTime):
                raise TypeError(
                    f"{name} must be ClockTime, got {type(value).__name__}"
                )
        return cls.from_total_seconds(abs(end.total_seconds - start.total_seconds))

    # -- derived views ------------------------------------------------------

    @property
    def hours(self) -> int:
        return self.total_seconds // SECONDS_PER_HOUR

    @property
    def minutes(self) -> int:
        return (self.total_seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE

    @property
    def seconds(self) -> int:
        return self.total_seconds % SECONDS_PER_MINUTE

    # -- arithmetic ---------------------------------------------------------

    def plus(self, other: Duration) -> Duration:
        """Sum of two durations.  Never fails."""
        if not isinstance(other, Duration):
            raise TypeError(f"cannot add {type(other).__name__} to Duration")
        return Duration.from_total_seconds(self.total_seconds + other.total_seconds)

    def minus(self, other: Duration) -> Duration:
        """Difference of two durations.

        Raises:
            InvalidOperationError: *other* is longer than this duration.
        """
        if not isinstance(other, Duration):
            raise TypeError(f"cannot subtract {type(other).__name__} from Duration")
        remaining = self.total_seconds - other.total_seconds
        if remaining < 0:
            logger.debug(
                "Rejected duration subtraction %s - %s",
                self,
                other,
                extra={"context": {"left": str(self), "right": str(other)}},
            )
            raise InvalidOperationError(
                f"cannot subtract {other} from {self}: result would be negative",
                value=remaining,
            )
        return Duration.from_total_seconds(remaining)

    def multiply(self, factor: int) -> Duration:
        """Scale by a non-negative integer.

        Raises:
            TypeError: *factor* is not an ``int``.
            InvalidArgumentError: *factor* is negative.
        """
        _require_int("factor", factor)
        if factor < 0:
            logger.debug(
                "Rejected negative multiplier %s",
                format_int(factor),
                extra={"context": {"duration": str(self), "factor": factor}},
            )
            raise InvalidArgumentError(
                f"multiplier must not be negative, got {format_int(factor)}",
                value=factor,
            )
        return Duration.from_total_seconds(self.total_seconds * factor)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    # -- comparison ---------------------------------------------------------

    def equals(self, other: object) -> bool:
        """True when *other* is a Duration of the same length."""
        return isinstance(other, Duration) and self.total_seconds == other.total_seconds

    def compare_to(self, other: Duration) -> int:
        """Return -1, 0 or 1 as this duration is shorter, equal or longer."""
        if not isinstance(other, Duration):
            raise TypeError(f"cannot compare Duration with {type(other).__name__}")
        return (self.total_seconds > other.total_seconds) - (
            self.total_seconds < other.total_seconds
        )

    # -- formatting ---------------------------------------------------------

    def __str__(self) -> str:
        return f"{format_int(self.hours)}:{self.minutes:02d}:{self.seconds:02d}"

    def __repr__(self) -> str:
        return f"Duration({str(self)!r})"


Duration.ZERO = Duration()
