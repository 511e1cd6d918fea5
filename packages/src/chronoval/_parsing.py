"""Shared parser for colon-separated ``H:M:S`` text.

Both value types accept three ``:``-separated integer segments with
surrounding whitespace trimmed per segment.  They differ only in
whether a sign is tolerated: ``Duration`` parses signed integers (and
then rejects negatives as an *argument* error), ``ClockTime`` accepts
bare digits only.

Digits are restricted to ASCII ``0-9``.  ``int()`` alone would also
accept underscores and non-ASCII decimal digits, neither of which
belongs in a time string.

Segments may be arbitrarily long.  ``int()`` and ``str()`` refuse
decimal strings above ``sys.get_int_max_str_digits()`` digits, so
:func:`parse_int` and :func:`format_int` convert in fixed-size chunks
that stay under the smallest limit the interpreter allows.
"""

from __future__ import annotations

import logging
import re

from chronoval._errors import InvalidFormatError

logger = logging.getLogger(__name__)

_SEPARATOR = ":"
_SEGMENT_COUNT = 3

_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")

# Below the 640-digit floor of sys.set_int_max_str_digits().
_CHUNK_DIGITS = 600
_CHUNK_BASE = 10**_CHUNK_DIGITS


def parse_int(segment: str) -> int:
    """Convert an optionally signed run of ASCII digits to an ``int``.

    Unlike ``int()``, the number of digits is not limited.
    """
    negative = segment.startswith("-")
    digits = segment.lstrip("+-").lstrip("0")
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if negative else value


def format_int(value: int) -> str:
    """Decimal text of *value*, with no limit on the number of digits."""
    if value < 0:
        return "-" + format_int(-value)
    if value < _CHUNK_BASE:
        return str(value)
    chunks = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(f"{low:0{_CHUNK_DIGITS}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


def split_hms(text: str, *, signed: bool) -> tuple[int, int, int]:
    """Split *text* into three integers.

    Args:
        text: Input such as ``"13:58:41"`` or ``" 1 : 5 : 9 "``.
        signed: Accept a leading ``+`` or ``-`` on each segment.

    Returns:
        ``(first, second, third)`` as parsed integers.  No range
        checking is done here.

    Raises:
        TypeError: *text* is not a ``str``.
        InvalidFormatError: Wrong segment count or a non-integer
            segment.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    segments = [part.strip() for part in text.split(_SEPARATOR)]
    if len(segments) != _SEGMENT_COUNT:
        logger.debug(
            "Rejected time text with %d segments",
            len(segments),
            extra={"context": {"input": text}},
        )
        raise InvalidFormatError(
            f"expected {_SEGMENT_COUNT} ':'-separated segments, "
            f"got {len(segments)} in {text!r}",
            value=text,
        )

    pattern = _SIGNED if signed else _UNSIGNED
    for segment in segments:
        if pattern.fullmatch(segment) is None:
            logger.debug(
                "Rejected non-integer segment %r",
                segment,
                extra={"context": {"input": text}},
            )
            raise InvalidFormatError(
                f"segment {segment!r} in {text!r} is not an integer",
                value=text,
            )

    first, second, third = (parse_int(segment) for segment in segments)
    return first, second, third
