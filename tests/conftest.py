"""Shared test fixtures."""

import pytest

from uptime_sla.domain.entities.uptime_series import UptimeSeries
from uptime_sla.infrastructure.config import reset_settings
from uptime_sla.infrastructure.telemetry.seed_data import (
    REFERENCE_WINDOW,
    SEED_SERIES,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment in every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def reference_window() -> tuple[int, int]:
    """Evaluation window of the reference series."""
    return REFERENCE_WINDOW


@pytest.fixture
def reference_series() -> UptimeSeries:
    """30 samples polled every 100s with resets, gaps and two exceptions."""
    return UptimeSeries(
        device_id="edge-router-01", samples=list(SEED_SERIES["edge-router-01"])
    )
