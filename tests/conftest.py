"""Shared fixtures for the minimize-access test suite."""

from __future__ import annotations

import logging

import pytest

from minimize_access.core.enums import ExposureStrategy
from minimize_access.exposure import ExposureFacade


# ---------------------------------------------------------------------------
# Facades
# ---------------------------------------------------------------------------

@pytest.fixture
def facade() -> ExposureFacade:
    """Return a facade over ``[3, 4, 5]`` with the view strategy."""
    return ExposureFacade([3, 4, 5])


@pytest.fixture
def copy_facade() -> ExposureFacade:
    """Return a facade over ``[3, 4, 5]`` that publishes copies by default."""
    return ExposureFacade([3, 4, 5], default_strategy=ExposureStrategy.COPY)


@pytest.fixture
def hazard_array() -> list[int]:
    """Return a fresh directly exposed array, ``[2, 3]``."""
    return [2, 3]


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
