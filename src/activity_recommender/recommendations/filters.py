"""Hard constraints an activity must meet to be recommended.

Weather and timing are non-negotiable: failing any check removes the
activity, whatever the user's preferences are.
"""

from __future__ import annotations

from activity_recommender.models.activity import Activity
from activity_recommender.models.recommendation import FilterResult
from activity_recommender.models.weather import TimeOfDay, WeatherSnapshot


def check_activity(
    activity: Activity,
    weather: WeatherSnapshot,
    time_of_day: TimeOfDay,
) -> FilterResult:
    """Check an activity against current weather and a time of day.

    Args:
        activity: Activity to check
        weather: Current weather
        time_of_day: Time of day the activity must allow

    Returns:
        FilterResult listing every failed constraint
    """
    s = activity.suitability
    failures: list[str] = []

    temp = weather.temperature_c
    if temp < s.temp_min_c:
        failures.append(f"temperature {temp}°C below {s.temp_min_c}°C")
    if temp > s.temp_max_c:
        failures.append(f"temperature {temp}°C above {s.temp_max_c}°C")

    rain = weather.rain_precipitation_mm
    if rain > s.rain_max_mm:
        failures.append(f"rain {rain}mm above {s.rain_max_mm}mm")

    snow = weather.snow_precipitation_mm
    if snow > s.snow_max_mm:
        failures.append(f"snow {snow}mm above {s.snow_max_mm}mm")

    if weather.wind_speed_ms > s.wind_max_ms:
        failures.append(f"wind {weather.wind_speed_ms} m/s above {s.wind_max_ms} m/s")

    if weather.uv_index > s.uv_index_max:
        failures.append(f"UV index {weather.uv_index} above {s.uv_index_max}")

    if not s.allows_time(time_of_day):
        failures.append(f"not suitable in the {time_of_day.value}")

    return FilterResult(activity=activity, failures=failures)
