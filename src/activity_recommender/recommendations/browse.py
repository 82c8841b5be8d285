"""Lightweight catalog filter for browsing activities.

Unlike the recommendation engine this ignores the weather and does no
scoring: it hides activities that clearly don't fit the user's taste.
"""

from __future__ import annotations

from collections.abc import Iterable

from activity_recommender.config import Settings, get_settings
from activity_recommender.models.activity import Activity, ActivityCategory
from activity_recommender.models.preferences import UserPreferences


def is_browsable(
    activity: Activity,
    preferences: UserPreferences,
    settings: Settings,
) -> bool:
    """Check if an activity should be listed for these preferences."""
    outdoor = preferences.outdoor_preference
    if outdoor is not None:
        if outdoor > settings.browse_outdoor_high and activity.category == ActivityCategory.INDOOR:
            return False
        if outdoor < settings.browse_outdoor_low and activity.category == ActivityCategory.OUTDOOR:
            return False

    if preferences.physical_level is not None:
        diff = abs(preferences.physical_level - activity.suitability.physical_level)
        if diff > settings.browse_physical_tolerance:
            return False

    time_of_day = preferences.concrete_time_of_day()
    if time_of_day is not None and not activity.suitability.allows_time(time_of_day):
        return False

    if preferences.disliked_activities and activity.has_any_tag(
        set(preferences.disliked_activities)
    ):
        return False

    return True


def browse_activities(
    activities: Iterable[Activity],
    preferences: UserPreferences,
    settings: Settings | None = None,
) -> list[Activity]:
    """Filter activities for the browse view, keeping their order."""
    settings = settings or get_settings()
    return [a for a in activities if is_browsable(a, preferences, settings)]
