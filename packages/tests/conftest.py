"""Pytest configuration and shared fixtures."""

import pytest

# The chronoval testing plugin is registered via a ``pytest11`` entry
# point (pyproject.toml) for external consumers.  In our own test
# suite we disable it (``-p no:chronoval``) and load it here instead,
# so that its lazy chronoval imports happen after ``pytest-cov`` has
# started tracing.
pytest_plugins = ["chronoval.testing._plugin"]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests exercising the public API"
    )
