"""Shared fixtures for flood watch tests."""

import pytest

from flood_watch.flood.registry import LocationRegistry

from fakes import LAHORE, QUETTA, FakeForecastClient, network_failure, raw_forecast


@pytest.fixture
def registry():
    return LocationRegistry([LAHORE, QUETTA])


@pytest.fixture
def scenario_client():
    """Lahore peaks at 1600 m³/s, Quetta fails with a network error."""
    return FakeForecastClient({
        "Lahore": raw_forecast(LAHORE, [100.0, 600.0, 1600.0]),
        "Quetta": network_failure(QUETTA),
    })
