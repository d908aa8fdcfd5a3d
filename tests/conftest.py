"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, data and log
directories, and a fixed clock so date-based views are deterministic.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from taskpad.models.storage_strategy import MemoryStorageStrategy
from taskpad.services.planner import Planner
from taskpad.utils.ui.console import set_color

# A Monday morning; seed due dates are relative to this day.
NOW = datetime(2024, 6, 10, 9, 30, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Filesystem / singleton isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point platformdirs at *tmp_path* and reset module-level singletons."""
    for var in ("XDG_CONFIG_HOME", "XDG_DATA_HOME", "XDG_STATE_HOME", "XDG_CACHE_HOME"):
        monkeypatch.setenv(var, str(tmp_path / var.lower()))

    import taskpad.config as config_mod
    import taskpad.utils.logger as logger_mod
    from taskpad.services.context_manager import get_strategy_context

    monkeypatch.setattr(config_mod, "_config_manager", None)
    monkeypatch.setattr(logger_mod, "_logger", None)
    get_strategy_context.cache_clear()

    yield

    get_strategy_context.cache_clear()
    set_color(True)
    app_logger = logging.getLogger("taskpad")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)
    app_logger.propagate = True


# ---------------------------------------------------------------------------
# Clock and planner fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def now():
    return NOW


@pytest.fixture()
def clock():
    return lambda: NOW


@pytest.fixture()
def planner(clock):
    """Planner over an empty in-memory store."""
    return Planner(MemoryStorageStrategy(clock=clock), clock=clock)


@pytest.fixture()
def seeded_planner(clock):
    """Planner over the bundled seed records, dated relative to NOW."""
    return Planner(MemoryStorageStrategy(seed=True, clock=clock), clock=clock)


@pytest.fixture()
def cli_planner(seeded_planner):
    """Make every command module use the seeded planner."""
    with (
        patch("taskpad.commands.views.get_planner", return_value=seeded_planner),
        patch("taskpad.commands.tasks.get_planner", return_value=seeded_planner),
        patch("taskpad.commands.projects.get_planner", return_value=seeded_planner),
    ):
        yield seeded_planner
