"""Exception hierarchy and structured error payloads.

Every validation failure in chronoval is raised synchronously at the
point of violation.  Nothing is retried, recovered or partially built:
an invalid input never yields a value.

Hierarchy::

    ChronovalError
    ├── InvalidArgumentError      (also a ValueError)
    │   ├── InvalidFormatError    malformed "H:M:S" text
    │   └── OutOfRangeError       ClockTime field outside its bound
    └── InvalidOperationError     (also an ArithmeticError)

``InvalidFormatError`` and ``OutOfRangeError`` refine
``InvalidArgumentError``: a caller that only cares about "the argument
was bad" catches the parent.

For applications that forward errors to a log aggregator, this module
also provides :class:`ErrorPayload` and :func:`build_error_payload`,
which turn an exception into a flat JSON-serialisable record.

Payload schema::

    {
        "error_type": "out_of_range",
        "message": "hour must be in [0, 23], got 24",
        "value": 24,
        "timestamp": "2026-02-14T12:34:56+00:00",
        "details": {}
    }
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field, fields
from datetime import UTC, datetime

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ChronovalError(Exception):
    """Base class for all chronoval errors.

    Args:
        message: Human-readable description.
        value: The offending input, when there is one.
    """

    def __init__(self, message: str, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidArgumentError(ChronovalError, ValueError):
    """A numeric argument is negative where negativity is disallowed."""


class InvalidFormatError(InvalidArgumentError):
    """A string does not have the expected ``H:M:S`` shape."""


class OutOfRangeError(InvalidArgumentError):
    """A ClockTime field lies outside its wall-clock bound."""


class InvalidOperationError(ChronovalError, ArithmeticError):
    """An operation would produce a value violating an invariant."""


DEFAULT_ERROR_TYPES: dict[type[Exception], str] = {
    InvalidArgumentError: "invalid_argument",
    InvalidFormatError: "invalid_format",
    OutOfRangeError: "out_of_range",
    InvalidOperationError: "invalid_operation",
}

# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ErrorPayload:
    """Immutable structured error record, ready for JSON serialisation."""

    error_type: str
    message: str
    value: object
    timestamp: str
    details: dict[str, object] = field(default_factory=dict)

    def to_json(self) -> str:
        """Serialise to a JSON string.

        Offending values that are not JSON-native (e.g. a ``Duration``
        passed where an ``int`` was expected) are rendered with
        ``str()``.
        """
        return json.dumps(
            {f.name: getattr(self, f.name) for f in fields(self)}, default=str
        )


# ---------------------------------------------------------------------------
# Payload builder
# ---------------------------------------------------------------------------


def _resolve_error_type(
    error: Exception,
    error_type_map: dict[type[Exception], str],
) -> str:
    # Most specific class wins: OutOfRangeError maps to "out_of_range"
    # even though it is also an InvalidArgumentError.
    for cls in type(error).__mro__:
        if cls in error_type_map:
            return error_type_map[cls]
    return "error"


def build_error_payload(
    error: Exception,
    *,
    error_type_map: dict[type[Exception], str] | None = None,
    details: dict[str, object] | None = None,
    clock: Callable[[], datetime] | None = None,
) -> ErrorPayload:
    """Convert an exception into a structured :class:`ErrorPayload`.

    The exception's MRO is walked against the mapping, so subclasses of
    a mapped type inherit its ``error_type`` unless mapped themselves.

    Args:
        error: The exception to convert.
        error_type_map: Mapping from exception types to machine-readable
            ``error_type`` strings.  Defaults to
            :data:`DEFAULT_ERROR_TYPES`.  Unmapped types fall back to
            ``"error"``.
        details: Optional dict of additional context.
        clock: Optional callable returning a :class:`~datetime.datetime`.
            Defaults to ``datetime.now(UTC)``.

    Returns:
        A frozen dataclass ready for serialisation.
    """
    resolved_map = DEFAULT_ERROR_TYPES if error_type_map is None else error_type_map
    now = clock() if clock is not None else datetime.now(UTC)
    return ErrorPayload(
        error_type=_resolve_error_type(error, resolved_map),
        message=str(error),
        value=getattr(error, "value", None),
        timestamp=now.isoformat(),
        details=details or {},
    )
