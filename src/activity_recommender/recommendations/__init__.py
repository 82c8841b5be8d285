"""Activity recommendation: hard filtering, scoring and ranking."""

from activity_recommender.recommendations.browse import (
    browse_activities,
    is_browsable,
)
from activity_recommender.recommendations.engine import (
    RecommendationEngine,
    target_time_of_day,
)
from activity_recommender.recommendations.filters import check_activity
from activity_recommender.recommendations.scoring import (
    score_activity,
    season_rating,
)

__all__ = [
    "browse_activities",
    "is_browsable",
    "RecommendationEngine",
    "target_time_of_day",
    "check_activity",
    "score_activity",
    "season_rating",
]
