"""Domain models for activity recommendations."""

from activity_recommender.models.weather import (
    Season,
    TimeOfDay,
    WeatherPayloadError,
    WeatherSnapshot,
    classify_time_of_day,
    season_for_month,
    season_for_timestamp,
)
from activity_recommender.models.activity import (
    Activity,
    ActivityCategory,
    Suitability,
)
from activity_recommender.models.preferences import (
    DEFAULT_PREFERENCES,
    PreferredTimeOfDay,
    UserPreferences,
)
from activity_recommender.models.recommendation import (
    FilterResult,
    ScoreFactor,
    ScoredActivity,
)
from activity_recommender.models.air_quality import (
    AqiDescription,
    aqi_percentage,
    describe_aqi,
)

__all__ = [
    # Weather
    "Season",
    "TimeOfDay",
    "WeatherPayloadError",
    "WeatherSnapshot",
    "classify_time_of_day",
    "season_for_month",
    "season_for_timestamp",
    # Activity
    "Activity",
    "ActivityCategory",
    "Suitability",
    # Preferences
    "DEFAULT_PREFERENCES",
    "PreferredTimeOfDay",
    "UserPreferences",
    # Recommendation
    "FilterResult",
    "ScoreFactor",
    "ScoredActivity",
    # Air quality
    "AqiDescription",
    "aqi_percentage",
    "describe_aqi",
]
