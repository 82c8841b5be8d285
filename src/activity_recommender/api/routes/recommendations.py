"""Recommendation routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from activity_recommender.config import Settings, get_settings
from activity_recommender.models.activity import Activity
from activity_recommender.models.preferences import UserPreferences
from activity_recommender.models.weather import Season, TimeOfDay, WeatherSnapshot
from activity_recommender.recommendations.engine import RecommendationEngine
from activity_recommender.service import get_engine

router = APIRouter()


class RecommendationRequest(BaseModel):
    """Request for activity recommendations."""

    weather: WeatherSnapshot | None = None
    preferences: UserPreferences | None = None
    limit: int | None = Field(
        default=None, ge=1, description="Max activities to return (default from settings)"
    )


class RankedActivity(BaseModel):
    """An activity with its ranking score."""

    activity: Activity
    score: float


class RecommendationResponse(BaseModel):
    """Ranked activities for the supplied weather."""

    time_of_day: TimeOfDay | None = None
    season: Season | None = None
    activities: list[RankedActivity] = Field(default_factory=list)


@router.post("", response_model=RecommendationResponse)
async def recommend(
    request: RecommendationRequest,
    engine: RecommendationEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> RecommendationResponse:
    """Rank activities for the weather and preferences in the request."""
    if request.weather is None:
        return RecommendationResponse()

    ranking = engine.rank(request.weather, request.preferences)
    limit = request.limit or settings.recommendation_limit

    return RecommendationResponse(
        time_of_day=request.weather.time_of_day(),
        season=request.weather.season(),
        activities=[
            RankedActivity(activity=item.activity, score=item.score)
            for item in ranking[:limit]
        ],
    )
