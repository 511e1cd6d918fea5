"""Library configuration via pydantic-settings.

chronoval itself needs no configuration to compute anything.  The only
tunable concern is how its diagnostic logging is emitted when a host
application opts in through :func:`chronoval.configure_logging`.

Values are loaded from ``CHRONOVAL_``-prefixed environment variables
and/or a ``.env`` file.  Nested models use ``__`` as the delimiter,
e.g. ``CHRONOVAL_LOGGING__LEVEL=DEBUG``.

Nothing is read at import time: settings exist only when a caller
instantiates :class:`Settings`.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseModel):
    """Logging configuration for the ``chronoval`` logger.

    When ``file`` is set, records are also written to a rotating file
    (size-based rotation, ``backup_count`` generations kept).

    The ``format`` field selects the output format:

    - ``"text"`` (default) — human-readable timestamped lines.
    - ``"json"`` — one JSON object per line, for log aggregators.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description=(
            "Level of the 'chronoval' logger.  Rejected inputs are "
            "logged at DEBUG."
        ),
    )
    format: Literal["json", "text"] = Field(
        default="text",
        description="Log output format: 'json' lines or plain 'text'.",
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    max_file_size_mb: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description=(
            "Maximum log file size in megabytes before rotation. "
            "Only applies when ``file`` is set."
        ),
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


class Settings(BaseSettings):
    """Root chronoval settings.

    Example ``.env``::

        CHRONOVAL_LOGGING__LEVEL=DEBUG
        CHRONOVAL_LOGGING__FORMAT=json
        CHRONOVAL_LOGGING__FILE=/var/log/chronoval.log
    """

    model_config = SettingsConfigDict(
        env_prefix="CHRONOVAL_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    """``extra="ignore"`` because a shared ``.env`` file usually holds
    the host application's own keys as well."""

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
