"""Pytest plugin providing shared chronoval fixtures.

Registers ``fake_clock``, ``isolated_settings`` and
``chronoval_debug_logs`` for any test suite that depends on chronoval.
Discovered through the ``pytest11`` entry point.

chronoval modules are imported inside the fixture bodies, not at the
top of this file: pytest loads plugins before ``pytest-cov`` starts
tracing, and eager imports would hide the package from coverage.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from chronoval._settings import Settings
    from chronoval.testing._clock import FakeClock


@pytest.fixture
def fake_clock() -> FakeClock:
    """FakeClock reading midnight."""
    from chronoval.testing._clock import FakeClock

    return FakeClock()


@pytest.fixture
def isolated_settings() -> Settings:
    """Settings built from model defaults only."""
    from chronoval.testing._settings import make_settings

    return make_settings()


@pytest.fixture
def chronoval_debug_logs(
    caplog: pytest.LogCaptureFixture,
) -> Iterator[pytest.LogCaptureFixture]:
    """``caplog`` capturing DEBUG records from the ``chronoval`` logger.

    Restores the package logger's level and propagation afterwards, in
    case a test called :func:`chronoval.configure_logging`.
    """
    package_logger = logging.getLogger("chronoval")
    original_level = package_logger.level
    original_propagate = package_logger.propagate
    package_logger.propagate = True
    with caplog.at_level(logging.DEBUG, logger="chronoval"):
        yield caplog
    package_logger.setLevel(original_level)
    package_logger.propagate = original_propagate
