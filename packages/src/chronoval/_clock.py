"""Wall-clock port and system adapter.

Provides ClockPort (Protocol) and SystemClock, the source used by
:meth:`ClockTime.now`.  Keeping the reading behind a port lets tests
inject a fixed time instead of patching :mod:`datetime`.

Readings are naive local times; chronoval has no notion of time zones.
"""

from __future__ import annotations

from datetime import datetime, time
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Source of the current time of day.

    The default implementation reads the local system clock.  Tests
    inject :class:`chronoval.testing.FakeClock` for reproducible
    readings.
    """

    def now(self) -> time:
        """Return the current local time of day.

        Sub-second precision in the result is ignored by callers.
        """
        ...


class SystemClock:
    """Production clock reading ``datetime.now()``.

    Satisfies :class:`ClockPort` via structural subtyping (PEP 544).
    """

    def now(self) -> time:
        """Return the current local time of day."""
        return datetime.now().time()
