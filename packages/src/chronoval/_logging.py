"""Structured JSON log formatter and opt-in logging configuration.

chronoval logs through ``logging.getLogger(__name__)`` in each module.
The package logger carries only a :class:`logging.NullHandler` until a
host application calls :func:`configure_logging`, so importing the
library never produces output on its own.

What gets logged:

- ``DEBUG`` — every rejected input or failed operation, just before
  the corresponding :class:`~chronoval.ChronovalError` is raised.  The
  offending values travel in the record's ``context`` extra.

Nothing is logged on the success path.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from typing import Any

from chronoval._settings import LoggingSettings

PACKAGE_LOGGER = "chronoval"

_ONE_MB = 1024 * 1024

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects (NDJSON).

    Each record produces a JSON object with these fields:

    - ``timestamp`` — ISO 8601, always UTC
    - ``level`` — Python log level name
    - ``logger`` — dotted logger name
    - ``message`` — the formatted log message
    - ``service`` — name of the host application
    - ``version`` — host application version (omitted when empty)
    - ``context`` — the ``context`` extra, when the record has one
    - ``exception`` — formatted traceback (only when an exception is
      logged)
    - ``stack_info`` — stack trace (only when ``stack_info=True``)

    Args:
        service: Host application name included in every line.
        version: Host application version.  Omitted when empty.
    """

    def __init__(
        self,
        *,
        service: str = "",
        version: str = "",
    ) -> None:
        super().__init__()
        self._service = service
        self._version = version

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a single-line JSON string."""
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
        }

        if self._version:
            entry["version"] = self._version

        context = getattr(record, "context", None)
        if context:
            entry["context"] = context

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


def configure_logging(
    settings: LoggingSettings,
    *,
    service: str,
    version: str = "",
) -> logging.Logger:
    """Attach handlers to the ``chronoval`` logger from settings.

    Only the package logger is touched; the root logger and the host
    application's handlers are left alone.  Existing handlers on the
    package logger are closed and removed first, so repeated calls do
    not duplicate output.  Propagation is turned off so records are
    not emitted twice when the root logger also has handlers.

    A :class:`logging.StreamHandler` writing to ``stderr`` is always
    installed.  When ``settings.file`` is set, a
    :class:`~logging.handlers.RotatingFileHandler` is added as well.

    Args:
        settings: Logging configuration (level, format, file).
        service: Host application name passed to :class:`JsonFormatter`.
        version: Host application version.  Defaults to ``""``.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    if settings.format == "json":
        formatter: logging.Formatter = JsonFormatter(service=service, version=version)
    else:
        formatter = logging.Formatter(_TEXT_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    package_logger.addHandler(stream_handler)

    if settings.file is not None:
        file_handler = RotatingFileHandler(
            settings.file,
            maxBytes=settings.max_file_size_mb * _ONE_MB,
            backupCount=settings.backup_count,
        )
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.setLevel(settings.level)
    package_logger.propagate = False
    return package_logger
