"""Air quality index descriptions (OpenWeather 1-5 scale)."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AqiDescription(BaseModel):
    """Human-readable description of an air quality index value."""

    level: str = Field(..., description="Short level name (e.g. 'Good')")
    color: str = Field(..., description="Display color")
    message: str = Field(..., description="What the level means")
    caution: str = Field(..., description="Advice for outdoor activity")


AQI_DESCRIPTIONS: dict[int, AqiDescription] = {
    1: AqiDescription(
        level="Good",
        color="green",
        message="Air quality is considered satisfactory, and air pollution poses little or no risk.",
        caution="No precautions needed. Enjoy outdoor activities.",
    ),
    2: AqiDescription(
        level="Fair",
        color="lightgreen",
        message=(
            "Air quality is acceptable; however, there may be a moderate health "
            "concern for a very small number of people."
        ),
        caution="Unusually sensitive people should consider reducing prolonged outdoor exertion.",
    ),
    3: AqiDescription(
        level="Moderate",
        color="yellow",
        message=(
            "Members of sensitive groups may experience health effects. "
            "The general public is not likely to be affected."
        ),
        caution="People with respiratory or heart disease should limit prolonged outdoor exertion.",
    ),
    4: AqiDescription(
        level="Poor",
        color="orange",
        message=(
            "Everyone may begin to experience health effects; members of sensitive "
            "groups may experience more serious health effects."
        ),
        caution=(
            "Active children and adults, and people with respiratory disease "
            "should avoid prolonged outdoor exertion."
        ),
    ),
    5: AqiDescription(
        level="Very Poor",
        color="red",
        message=(
            "Health warnings of emergency conditions. "
            "The entire population is more likely to be affected."
        ),
        caution="Everyone should avoid outdoor exertion and stay indoors when possible.",
    ),
}

UNKNOWN_AQI = AqiDescription(
    level="Unknown",
    color="gray",
    message="Air quality data is unavailable or cannot be calculated.",
    caution="Check back later for updated information.",
)


def describe_aqi(aqi: int) -> AqiDescription:
    """Get the description for an AQI value, or ``UNKNOWN_AQI`` if out of range."""
    return AQI_DESCRIPTIONS.get(aqi, UNKNOWN_AQI)


def aqi_percentage(aqi: float) -> float:
    """Convert an AQI value (1-5) to a 0-100 percentage for progress bars."""
    return min(100.0, max(0.0, aqi / 5 * 100))
