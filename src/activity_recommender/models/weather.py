"""Weather snapshot model and time-of-day/season classification."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, Field

# Offsets (seconds) used to split the day around sunrise and sunset
MORNING_WINDOW_S = 4 * 3600  # morning lasts 4 hours after sunrise
EVENING_LEAD_S = 2 * 3600  # evening starts 2 hours before sunset
NIGHT_LAG_S = 2 * 3600  # night starts 2 hours after sunset


class WeatherPayloadError(ValueError):
    """Raised when a provider payload cannot be turned into a snapshot."""


class TimeOfDay(str, Enum):
    """Time of day labels used for activity scheduling."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"


class Season(str, Enum):
    """Meteorological seasons (Northern Hemisphere)."""

    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"


def classify_time_of_day(dt: int, sunrise: int, sunset: int) -> TimeOfDay:
    """Classify an observation time relative to the day's sunrise and sunset.

    All values are epoch seconds in the same time base. Branches are checked
    in order and the first match wins, which keeps very short days
    deterministic even when the morning and evening windows overlap.

    Args:
        dt: Observation time
        sunrise: Sunrise time
        sunset: Sunset time

    Returns:
        TimeOfDay classification
    """
    if dt < sunrise or dt > sunset + NIGHT_LAG_S:
        return TimeOfDay.NIGHT
    elif dt < sunrise + MORNING_WINDOW_S:
        return TimeOfDay.MORNING
    elif dt < sunset - EVENING_LEAD_S:
        return TimeOfDay.AFTERNOON
    else:
        return TimeOfDay.EVENING


def season_for_month(month: int) -> Season:
    """Map a calendar month (1-12) to its season."""
    if 3 <= month <= 5:
        return Season.SPRING
    elif 6 <= month <= 8:
        return Season.SUMMER
    elif 9 <= month <= 11:
        return Season.FALL
    return Season.WINTER


def season_for_timestamp(dt: int, offset_s: int = 0) -> Season:
    """Get the season for an epoch timestamp shifted into local time."""
    local = datetime.fromtimestamp(dt + offset_s, tz=timezone.utc)
    return season_for_month(local.month)


class WeatherSnapshot(BaseModel):
    """Current weather observation for a location.

    Only the fields the recommendation engine reads are modeled. Precipitation
    amounts are the provider's last-hour totals and may be missing.
    """

    observed_at: int = Field(..., description="Observation time (epoch seconds)")
    sunrise: int = Field(..., description="Sunrise time (epoch seconds)")
    sunset: int = Field(..., description="Sunset time (epoch seconds)")

    temperature_c: float = Field(..., description="Temperature in Celsius")
    condition: str | None = Field(
        default=None, description="Provider condition label (e.g. 'Rain', 'Clear')"
    )
    rain_1h_mm: float | None = Field(
        default=None, ge=0, description="Rain in the last hour (mm)"
    )
    snow_1h_mm: float | None = Field(
        default=None, ge=0, description="Snow in the last hour (mm)"
    )
    wind_speed_ms: float = Field(..., ge=0, description="Wind speed in m/s")
    uv_index: float = Field(..., ge=0, description="UV index")

    timezone_offset_s: int = Field(
        default=0, description="Shift from UTC to local time in seconds"
    )

    @classmethod
    def from_onecall(cls, payload: dict[str, Any]) -> Self:
        """Build a snapshot from an OpenWeather One Call response.

        Reads the ``current`` block plus the top-level ``timezone_offset``.

        Raises:
            WeatherPayloadError: If required keys are missing
        """
        current = payload.get("current")
        if not isinstance(current, dict):
            raise WeatherPayloadError("One Call payload has no 'current' block")

        missing = [
            key
            for key in ("dt", "sunrise", "sunset", "temp", "wind_speed", "uvi")
            if current.get(key) is None
        ]
        if missing:
            raise WeatherPayloadError(
                f"One Call 'current' block is missing: {', '.join(missing)}"
            )

        conditions = current.get("weather") or []
        condition = conditions[0].get("main") if conditions else None

        return cls(
            observed_at=current["dt"],
            sunrise=current["sunrise"],
            sunset=current["sunset"],
            temperature_c=current["temp"],
            condition=condition,
            rain_1h_mm=(current.get("rain") or {}).get("1h"),
            snow_1h_mm=(current.get("snow") or {}).get("1h"),
            wind_speed_ms=current["wind_speed"],
            uv_index=current["uvi"],
            timezone_offset_s=payload.get("timezone_offset") or 0,
        )

    def _condition_is(self, label: str) -> bool:
        return (self.condition or "").lower() == label

    @property
    def rain_precipitation_mm(self) -> float:
        """Rain amount counted against activities (0 unless it is raining)."""
        if not self._condition_is("rain"):
            return 0.0
        return self.rain_1h_mm or 0.0

    @property
    def snow_precipitation_mm(self) -> float:
        """Snow amount counted against activities (0 unless it is snowing)."""
        if not self._condition_is("snow"):
            return 0.0
        return self.snow_1h_mm or 0.0

    def time_of_day(self) -> TimeOfDay:
        """Classify the observation time against sunrise/sunset."""
        return classify_time_of_day(self.observed_at, self.sunrise, self.sunset)

    def season(self) -> Season:
        """Get the season of the observation in local time."""
        return season_for_timestamp(self.observed_at, self.timezone_offset_s)
