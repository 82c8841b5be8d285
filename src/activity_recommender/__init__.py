"""Weather-aware activity recommendations."""

from activity_recommender.service import (
    get_all_activities,
    get_recommended_activities,
)

__version__ = "0.1.0"

__all__ = [
    "get_all_activities",
    "get_recommended_activities",
    "__version__",
]
