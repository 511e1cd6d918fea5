"""Public test-support utilities for chronoval.

Re-exports test doubles and factories so that consumer test suites
can import everything from a single ``chronoval.testing`` namespace
instead of reaching into private modules.

Provided symbols:

- :class:`FakeClock` — deterministic clock for ``ClockTime.now()``.
- :func:`make_settings` — factory for ``Settings`` without ``.env`` files.
"""

from chronoval.testing._clock import FakeClock
from chronoval.testing._settings import make_settings

__all__ = [
    "FakeClock",
    "make_settings",
]
