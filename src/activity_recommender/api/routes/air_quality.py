"""Air quality routes."""

from __future__ import annotations

from fastapi import APIRouter

from activity_recommender.models.air_quality import (
    AqiDescription,
    aqi_percentage,
    describe_aqi,
)

router = APIRouter()


class AirQualityResponse(AqiDescription):
    """AQI description with its progress-bar percentage."""

    aqi: int
    percentage: float


@router.get("/{aqi}", response_model=AirQualityResponse)
async def get_air_quality(aqi: int) -> AirQualityResponse:
    """Describe an air quality index value."""
    description = describe_aqi(aqi)
    return AirQualityResponse(
        aqi=aqi,
        percentage=aqi_percentage(aqi),
        **description.model_dump(),
    )
