"""Activity models defining weather tolerances and preference weights."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from activity_recommender.models.weather import TimeOfDay


class ActivityCategory(str, Enum):
    """Where an activity takes place."""

    OUTDOOR = "outdoor"
    INDOOR = "indoor"
    BOTH = "both"


def _require_unique(values: tuple, label: str) -> tuple:
    seen = set()
    for value in values:
        if value in seen:
            raise ValueError(f"Duplicate {label}: {value!r}")
        seen.add(value)
    return values


class Suitability(BaseModel):
    """Hard-filter bounds and soft-scoring weights for an activity.

    All bounds are inclusive. A definition with ``temp_min_c > temp_max_c``
    is accepted; such an activity can never pass the weather filter.
    """

    model_config = ConfigDict(frozen=True)

    # Weather bounds
    temp_min_c: float = Field(..., description="Lowest tolerated temperature (°C)")
    temp_max_c: float = Field(..., description="Highest tolerated temperature (°C)")
    rain_max_mm: float = Field(..., ge=0, description="Max rain in the last hour (mm)")
    snow_max_mm: float = Field(..., ge=0, description="Max snow in the last hour (mm)")
    wind_max_ms: float = Field(..., ge=0, description="Max wind speed (m/s)")
    uv_index_max: float = Field(..., ge=0, description="Max UV index")

    # Timing
    time_of_day: tuple[TimeOfDay, ...] = Field(
        ..., description="Times of day when the activity is appropriate"
    )

    # Scoring weights
    physical_level: float = Field(
        ..., ge=0, le=1, description="Required physical exertion (0-1)"
    )
    outdoor_preference: float = Field(
        ..., ge=0, le=1, description="How outdoor-oriented the activity is (0-1)"
    )
    season: float = Field(
        ..., ge=0, le=1, description="Affinity toward summer (0=winter, 1=summer)"
    )

    @field_validator("time_of_day")
    @classmethod
    def validate_time_of_day(cls, v: tuple[TimeOfDay, ...]) -> tuple[TimeOfDay, ...]:
        return _require_unique(v, "time of day")

    def allows_time(self, time_of_day: TimeOfDay | str) -> bool:
        """Check if the activity is appropriate at a time of day."""
        return TimeOfDay(time_of_day) in self.time_of_day


class Activity(BaseModel):
    """A suggestible activity. Instances are immutable once defined."""

    model_config = ConfigDict(frozen=True)

    # Identity
    id: str = Field(..., min_length=1, description="Unique activity identifier")
    name: str = Field(..., description="Human-readable activity name")
    description: str = Field(default="", description="Activity description")
    image_url: str = Field(default="/placeholder.svg", description="Display image")

    # Classification
    category: ActivityCategory = Field(..., description="Indoor/outdoor category")
    tags: tuple[str, ...] = Field(
        default=(), description="Labels used for preference matching"
    )

    suitability: Suitability

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return _require_unique(v, "tag")

    def has_any_tag(self, tags: set[str] | frozenset[str]) -> bool:
        """Check if any of this activity's tags is in ``tags``."""
        return any(tag in tags for tag in self.tags)
