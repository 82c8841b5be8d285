"""Pytest fixtures for activity recommender tests.

This module provides test fixtures that ensure:
1. No user .env file or environment leaks into the configuration
2. Weather snapshots with known time of day and season
3. Small hand-built activities for boundary tests
"""

import os
from datetime import datetime, timezone

import pytest

# Set test environment BEFORE importing application modules
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.pop("CATALOG_PATH", None)

from activity_recommender.catalog import DEFAULT_CATALOG, ActivityCatalog
from activity_recommender.models.activity import Activity, ActivityCategory, Suitability
from activity_recommender.models.preferences import PreferredTimeOfDay, UserPreferences
from activity_recommender.models.weather import TimeOfDay, WeatherSnapshot


def epoch(*args: int) -> int:
    """Epoch seconds for a UTC datetime."""
    return int(datetime(*args, tzinfo=timezone.utc).timestamp())


# 2024-06-15: sunrise 05:00, sunset 20:00 UTC
JUNE_SUNRISE = epoch(2024, 6, 15, 5, 0)
JUNE_SUNSET = epoch(2024, 6, 15, 20, 0)

# 2024-01-15: sunrise 07:30, sunset 16:30 UTC
JANUARY_SUNRISE = epoch(2024, 1, 15, 7, 30)
JANUARY_SUNSET = epoch(2024, 1, 15, 16, 30)


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_cached_state():
    """Reset settings and engine caches before each test."""
    from activity_recommender.config import get_settings
    from activity_recommender.service import get_catalog, get_engine

    for cached in (get_settings, get_catalog, get_engine):
        cached.cache_clear()
    yield
    for cached in (get_settings, get_catalog, get_engine):
        cached.cache_clear()


# =============================================================================
# Weather Fixtures
# =============================================================================


@pytest.fixture
def afternoon_weather() -> WeatherSnapshot:
    """Mild, dry summer afternoon."""
    return WeatherSnapshot(
        observed_at=epoch(2024, 6, 15, 12, 0),
        sunrise=JUNE_SUNRISE,
        sunset=JUNE_SUNSET,
        temperature_c=22.0,
        condition="Clear",
        wind_speed_ms=5.0,
        uv_index=3.0,
    )


@pytest.fixture
def night_weather() -> WeatherSnapshot:
    """Clear, calm summer night."""
    return WeatherSnapshot(
        observed_at=epoch(2024, 6, 15, 23, 30),
        sunrise=JUNE_SUNRISE,
        sunset=JUNE_SUNSET,
        temperature_c=18.0,
        condition="Clear",
        wind_speed_ms=2.0,
        uv_index=0.0,
    )


@pytest.fixture
def rainy_weather() -> WeatherSnapshot:
    """Rainy spring afternoon."""
    return WeatherSnapshot(
        observed_at=epoch(2024, 4, 15, 13, 0),
        sunrise=epoch(2024, 4, 15, 6, 0),
        sunset=epoch(2024, 4, 15, 19, 30),
        temperature_c=15.0,
        condition="Rain",
        rain_1h_mm=3.0,
        wind_speed_ms=6.0,
        uv_index=2.0,
    )


@pytest.fixture
def winter_weather() -> WeatherSnapshot:
    """Cold, snowy winter morning."""
    return WeatherSnapshot(
        observed_at=epoch(2024, 1, 15, 9, 0),
        sunrise=JANUARY_SUNRISE,
        sunset=JANUARY_SUNSET,
        temperature_c=-5.0,
        condition="Snow",
        snow_1h_mm=2.0,
        wind_speed_ms=4.0,
        uv_index=1.0,
    )


@pytest.fixture
def onecall_payload() -> dict:
    """OpenWeather One Call response for a mild summer afternoon."""
    return {
        "lat": 40.7128,
        "lon": -74.006,
        "timezone": "America/New_York",
        "timezone_offset": -14400,
        "current": {
            "dt": epoch(2024, 6, 15, 16, 0),
            "sunrise": epoch(2024, 6, 15, 9, 25),
            "sunset": epoch(2024, 6, 16, 0, 30),
            "temp": 24.5,
            "feels_like": 24.9,
            "pressure": 1015,
            "humidity": 60,
            "dew_point": 16.2,
            "uvi": 5.2,
            "clouds": 20,
            "visibility": 10000,
            "wind_speed": 4.1,
            "wind_deg": 200,
            "weather": [
                {"id": 801, "main": "Clouds", "description": "few clouds", "icon": "02d"}
            ],
        },
        "hourly": [],
        "daily": [],
    }


# =============================================================================
# Activity and Preference Fixtures
# =============================================================================


def make_activity(
    activity_id: str = "test",
    name: str = "Test Activity",
    category: ActivityCategory = ActivityCategory.OUTDOOR,
    tags: tuple[str, ...] = (),
    **suitability,
) -> Activity:
    """Build an activity that tolerates almost any weather unless overridden."""
    values = {
        "temp_min_c": -50,
        "temp_max_c": 50,
        "rain_max_mm": 100,
        "snow_max_mm": 100,
        "wind_max_ms": 100,
        "uv_index_max": 12,
        "time_of_day": tuple(TimeOfDay),
        "physical_level": 0.5,
        "outdoor_preference": 0.5,
        "season": 0.5,
    }
    values.update(suitability)
    return Activity(
        id=activity_id,
        name=name,
        category=category,
        tags=tags,
        suitability=Suitability(**values),
    )


@pytest.fixture
def catalog() -> ActivityCatalog:
    """The built-in catalog."""
    return DEFAULT_CATALOG


@pytest.fixture
def outdoor_preferences() -> UserPreferences:
    """An active, outdoor-loving user who likes nature."""
    return UserPreferences(
        outdoor_preference=0.9,
        physical_level=0.6,
        favorite_activities=["nature"],
        disliked_activities=[],
        time_of_day=PreferredTimeOfDay.ANY,
    )


@pytest.fixture
def neutral_preferences() -> UserPreferences:
    """Preferences with every factor left unset."""
    return UserPreferences()
