"""Activity catalog routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from activity_recommender.config import Settings, get_settings
from activity_recommender.models.activity import Activity
from activity_recommender.models.preferences import UserPreferences
from activity_recommender.recommendations.browse import browse_activities
from activity_recommender.recommendations.engine import RecommendationEngine
from activity_recommender.service import get_engine

router = APIRouter()


@router.get("", response_model=list[Activity])
async def list_activities(
    engine: RecommendationEngine = Depends(get_engine),
) -> list[Activity]:
    """List every activity in catalog order."""
    return list(engine.catalog.get_all())


@router.post("/browse", response_model=list[Activity])
async def browse(
    preferences: UserPreferences,
    engine: RecommendationEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> list[Activity]:
    """List activities matching the user's taste, ignoring the weather."""
    return browse_activities(engine.catalog, preferences, settings)
