"""Public operations used by the UI layer.

The engine is built once per process from configuration and shared. It
holds no per-call state, so callers can simply re-invoke
``get_recommended_activities`` whenever weather or preferences change.
"""

from __future__ import annotations

from functools import lru_cache

from activity_recommender.catalog import DEFAULT_CATALOG, ActivityCatalog, load_catalog
from activity_recommender.config import get_settings
from activity_recommender.models.activity import Activity
from activity_recommender.models.preferences import UserPreferences
from activity_recommender.models.weather import WeatherSnapshot
from activity_recommender.recommendations.engine import RecommendationEngine


@lru_cache
def get_catalog() -> ActivityCatalog:
    """Get the configured catalog (built-in unless CATALOG_PATH is set)."""
    settings = get_settings()
    if settings.catalog_path is not None:
        return load_catalog(settings.catalog_path)
    return DEFAULT_CATALOG


@lru_cache
def get_engine() -> RecommendationEngine:
    """Get the shared recommendation engine."""
    return RecommendationEngine(get_catalog())


def get_all_activities() -> list[Activity]:
    """Get the full catalog in definition order."""
    return list(get_engine().catalog.get_all())


def get_recommended_activities(
    weather: WeatherSnapshot | None,
    preferences: UserPreferences | None = None,
) -> list[Activity]:
    """Get activities suited to the weather, best match first.

    Returns an empty list when no weather is available.
    """
    return get_engine().recommend(weather, preferences)
