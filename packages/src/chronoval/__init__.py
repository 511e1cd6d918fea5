"""chronoval.

Immutable wall-clock time (:class:`ClockTime`) and elapsed duration
(:class:`Duration`) value types, with day-wrapping arithmetic between
them.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from chronoval._clock import ClockPort, SystemClock
from chronoval._clocktime import SECONDS_PER_DAY, ClockTime
from chronoval._duration import Duration
from chronoval._errors import (
    DEFAULT_ERROR_TYPES,
    ChronovalError,
    ErrorPayload,
    InvalidArgumentError,
    InvalidFormatError,
    InvalidOperationError,
    OutOfRangeError,
    build_error_payload,
)
from chronoval._logging import JsonFormatter, configure_logging
from chronoval._settings import LoggingSettings, Settings

try:
    # Prefer the generated version file (setuptools_scm at build time)
    from chronoval._version import __version__
except ImportError:
    try:
        __version__ = version("chronoval")
    except PackageNotFoundError:
        # Source checkout on sys.path without installed metadata
        __version__ = "0.0.0+unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Value types
    "ClockTime",
    "Duration",
    "SECONDS_PER_DAY",
    # Clock
    "ClockPort",
    "SystemClock",
    # Errors
    "ChronovalError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "InvalidOperationError",
    "OutOfRangeError",
    "DEFAULT_ERROR_TYPES",
    "ErrorPayload",
    "build_error_payload",
    # Logging
    "JsonFormatter",
    "configure_logging",
    # Settings
    "LoggingSettings",
    "Settings",
]
