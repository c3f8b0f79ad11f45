"""Pytest fixtures for solar position tests.

This module provides test fixtures that ensure:
1. Settings never pick up a developer's environment or .env file
2. Shared observers and instants for reference scenarios
"""

from datetime import datetime, timezone

import pytest

from sun_position.models.location import Coordinates

SETTINGS_ENV_VARS = (
    "SUN_POSITION_DEFAULT_OBSERVER",
    "SUN_POSITION_DEFAULT_LATITUDE",
    "SUN_POSITION_DEFAULT_LONGITUDE",
    "SUN_POSITION_LOG_LEVEL",
    "SUN_POSITION_DEBUG",
)


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch):
    """Reset settings cache and environment before each test."""
    from sun_position.config import get_settings

    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Observers and Instants
# =============================================================================


@pytest.fixture
def london() -> Coordinates:
    """London, UK."""
    return Coordinates(latitude=51.5074, longitude=-0.1278)


@pytest.fixture
def sydney() -> Coordinates:
    """Sydney, Australia."""
    return Coordinates(latitude=-33.8688, longitude=151.2093)


@pytest.fixture
def solstice_noon() -> datetime:
    """Northern summer solstice, noon UTC."""
    return datetime(2020, 6, 21, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def j2000() -> datetime:
    """The J2000.0 epoch."""
    return datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)
