"""Soft scoring of activities against user preferences.

Each factor is a multiplier. Factors compose multiplicatively, so a poor
match on one axis dampens the score without zeroing it.
"""

from __future__ import annotations

from activity_recommender.models.activity import Activity
from activity_recommender.models.preferences import UserPreferences
from activity_recommender.models.recommendation import ScoredActivity
from activity_recommender.models.weather import Season

# Alignment factors range over [ALIGNMENT_FLOOR, 1.0]
ALIGNMENT_FLOOR = 0.7
FAVORITE_BOOST = 1.3
DISLIKE_PENALTY = 0.5
# Season factor ranges over [SEASON_FLOOR, 1.0]
SEASON_FLOOR = 0.8

_SEASON_SCALE = {
    Season.SPRING: 0.8,
    Season.SUMMER: 1.0,
    Season.FALL: 0.6,
}


def season_rating(season: Season, affinity: float) -> float:
    """Rate how well a season suits an activity.

    Args:
        season: Current season
        affinity: Activity's summer affinity (0-1)

    Returns:
        Rating in [0, 1]
    """
    if season == Season.WINTER:
        return 1 - affinity
    return affinity * _SEASON_SCALE[season]


def alignment_multiplier(preferred: float, actual: float) -> float:
    """Multiplier for how closely an activity matches a preferred level."""
    match = 1 - abs(preferred - actual)
    return ALIGNMENT_FLOOR + (1 - ALIGNMENT_FLOOR) * match


def season_multiplier(season: Season, affinity: float) -> float:
    """Multiplier for how well the current season suits an activity."""
    return SEASON_FLOOR + (1 - SEASON_FLOOR) * season_rating(season, affinity)


def score_activity(
    activity: Activity,
    preferences: UserPreferences,
    season: Season,
) -> ScoredActivity:
    """Score an activity against user preferences and the season.

    Missing preferences leave their factor out. The season factor always
    applies.
    """
    s = activity.suitability
    scored = ScoredActivity(activity=activity)

    if preferences.outdoor_preference is not None:
        scored.apply(
            "outdoor_preference",
            alignment_multiplier(preferences.outdoor_preference, s.outdoor_preference),
        )

    if preferences.physical_level is not None:
        scored.apply(
            "physical_level",
            alignment_multiplier(preferences.physical_level, s.physical_level),
        )

    if preferences.favorite_activities and activity.has_any_tag(
        set(preferences.favorite_activities)
    ):
        scored.apply("favorite", FAVORITE_BOOST)

    if preferences.disliked_activities and activity.has_any_tag(
        set(preferences.disliked_activities)
    ):
        scored.apply("disliked", DISLIKE_PENALTY)

    scored.apply("season", season_multiplier(season, s.season))
    return scored
