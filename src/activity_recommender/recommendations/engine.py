"""Recommendation engine ranking catalog activities for current weather.

The engine is stateless: every call recomputes time of day, season,
filtering and scoring from its inputs. Calling it twice with the same
inputs yields the same order.

Example:
    ```python
    engine = RecommendationEngine(DEFAULT_CATALOG)

    # Ranked activities, best first
    activities = engine.recommend(weather, preferences)

    # Same ranking with scores and the factors behind them
    ranking = engine.rank(weather, preferences)
    ```
"""

from __future__ import annotations

import logging

from activity_recommender.catalog import DEFAULT_CATALOG, ActivityCatalog
from activity_recommender.models.activity import Activity
from activity_recommender.models.preferences import UserPreferences
from activity_recommender.models.recommendation import FilterResult, ScoredActivity
from activity_recommender.models.weather import TimeOfDay, WeatherSnapshot
from activity_recommender.recommendations.filters import check_activity
from activity_recommender.recommendations.scoring import score_activity

logger = logging.getLogger(__name__)


def target_time_of_day(
    weather: WeatherSnapshot,
    preferences: UserPreferences | None = None,
) -> TimeOfDay:
    """Get the time of day activities must allow.

    A concrete preference wins; otherwise the time is derived from the
    weather's observation time.
    """
    if preferences is not None:
        requested = preferences.concrete_time_of_day()
        if requested is not None:
            return requested
    return weather.time_of_day()


class RecommendationEngine:
    """Ranks activities for a weather snapshot and user preferences."""

    def __init__(self, catalog: ActivityCatalog = DEFAULT_CATALOG):
        """Initialize the engine.

        Args:
            catalog: Read-only activity catalog shared across calls
        """
        self.catalog = catalog

    def evaluate(
        self,
        weather: WeatherSnapshot,
        preferences: UserPreferences | None = None,
    ) -> list[FilterResult]:
        """Check every catalog activity against the hard constraints.

        Returns:
            One FilterResult per activity, in catalog order
        """
        time_of_day = target_time_of_day(weather, preferences)
        return [
            check_activity(activity, weather, time_of_day) for activity in self.catalog
        ]

    def filter(
        self,
        weather: WeatherSnapshot,
        preferences: UserPreferences | None = None,
    ) -> list[Activity]:
        """Get the activities that meet every hard constraint, in catalog order."""
        survivors: list[Activity] = []
        for result in self.evaluate(weather, preferences):
            if result.passed:
                survivors.append(result.activity)
            else:
                logger.debug(
                    f"Excluded {result.activity.name}: {'; '.join(result.failures)}"
                )
        return survivors

    def rank(
        self,
        weather: WeatherSnapshot | None,
        preferences: UserPreferences | None = None,
    ) -> list[ScoredActivity]:
        """Rank eligible activities, best first.

        Without preferences the eligible activities keep catalog order and
        a neutral score of 1.0. Ties keep catalog order.

        Args:
            weather: Current weather; None yields an empty ranking
            preferences: Optional user preferences for scoring

        Returns:
            Scored activities sorted by descending score
        """
        if weather is None:
            logger.warning("No weather snapshot supplied; returning no recommendations")
            return []

        survivors = self.filter(weather, preferences)

        if preferences is None:
            return [ScoredActivity(activity=activity) for activity in survivors]

        season = weather.season()
        scored = [score_activity(activity, preferences, season) for activity in survivors]
        for item in scored:
            logger.debug(
                f"Scored {item.activity.name}: {item.score:.3f} "
                + ", ".join(f"{f.name}={f.multiplier:.2f}" for f in item.factors)
            )

        # sorted() is stable, also with reverse=True
        return sorted(scored, key=lambda item: item.score, reverse=True)

    def recommend(
        self,
        weather: WeatherSnapshot | None,
        preferences: UserPreferences | None = None,
    ) -> list[Activity]:
        """Get eligible activities ordered by score, best first."""
        return [item.activity for item in self.rank(weather, preferences)]
