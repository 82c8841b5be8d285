"""Activity catalog.

The catalog is built once and shared read-only by every engine. Activities
keep their definition order, which is also the tie-break order for ranking.

## Custom catalogs

A JSON file holding a list of activities can replace the built-in set:

```python
catalog = load_catalog(Path("activities.json"))
engine = RecommendationEngine(catalog)
```
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from activity_recommender.models.activity import Activity, ActivityCategory, Suitability
from activity_recommender.models.weather import TimeOfDay

logger = logging.getLogger(__name__)

_ACTIVITY_LIST = TypeAdapter(list[Activity])

MORNING = TimeOfDay.MORNING
AFTERNOON = TimeOfDay.AFTERNOON
EVENING = TimeOfDay.EVENING
NIGHT = TimeOfDay.NIGHT


class CatalogError(ValueError):
    """Raised when a catalog cannot be built or loaded."""


class ActivityCatalog:
    """Immutable, ordered collection of activities."""

    def __init__(self, activities: Iterable[Activity]):
        """Build a catalog.

        Args:
            activities: Activities in display order

        Raises:
            CatalogError: If two activities share an id
        """
        self._activities: tuple[Activity, ...] = tuple(activities)
        self._by_id: dict[str, Activity] = {}
        for activity in self._activities:
            if activity.id in self._by_id:
                raise CatalogError(f"Duplicate activity id: {activity.id!r}")
            self._by_id[activity.id] = activity

    def get_all(self) -> tuple[Activity, ...]:
        """Get every activity in definition order."""
        return self._activities

    def get(self, activity_id: str) -> Activity | None:
        """Look up an activity by id."""
        return self._by_id.get(activity_id)

    def tags(self) -> list[str]:
        """Get every distinct tag, in first-seen order."""
        seen: dict[str, None] = {}
        for activity in self._activities:
            for tag in activity.tags:
                seen.setdefault(tag, None)
        return list(seen)

    def __iter__(self) -> Iterator[Activity]:
        return iter(self._activities)

    def __len__(self) -> int:
        return len(self._activities)

    def __contains__(self, activity_id: object) -> bool:
        return activity_id in self._by_id


def load_catalog(path: Path) -> ActivityCatalog:
    """Load a catalog from a JSON file containing a list of activities.

    Raises:
        CatalogError: If the file can't be read or doesn't validate
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise CatalogError(f"Cannot read catalog file {path}: {e}") from e

    try:
        activities = _ACTIVITY_LIST.validate_json(raw)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog file {path}: {e}") from e

    catalog = ActivityCatalog(activities)
    logger.info(f"Loaded {len(catalog)} activities from {path}")
    return catalog


# Built-in activities
def create_beach_day_activity() -> Activity:
    """Create the beach day activity (hot, sunny, dry)."""
    return Activity(
        id="1",
        name="Beach Day",
        description="Enjoy swimming, sunbathing, and building sandcastles at the beach.",
        category=ActivityCategory.OUTDOOR,
        tags=("water", "swimming", "relaxation", "sun"),
        suitability=Suitability(
            temp_min_c=25,
            temp_max_c=35,
            rain_max_mm=0,
            snow_max_mm=0,
            wind_max_ms=15,
            uv_index_max=8,
            time_of_day=(MORNING, AFTERNOON),
            physical_level=0.4,
            outdoor_preference=0.9,
            season=1.0,
        ),
    )


def create_hiking_activity() -> Activity:
    """Create the hiking activity."""
    return Activity(
        id="2",
        name="Hiking",
        description="Explore nature trails and enjoy scenic views while hiking.",
        category=ActivityCategory.OUTDOOR,
        tags=("nature", "walking", "exercise", "views"),
        suitability=Suitability(
            temp_min_c=10,
            temp_max_c=28,
            rain_max_mm=1,  # Light drizzle is fine on a trail
            snow_max_mm=5,
            wind_max_ms=20,
            uv_index_max=7,
            time_of_day=(MORNING, AFTERNOON),
            physical_level=0.7,
            outdoor_preference=0.8,
            season=0.8,
        ),
    )


def create_museum_visit_activity() -> Activity:
    """Create the museum visit activity."""
    return Activity(
        id="3",
        name="Museum Visit",
        description="Explore art, history, and culture at a local museum.",
        category=ActivityCategory.INDOOR,
        tags=("art", "history", "culture", "education"),
        suitability=Suitability(
            temp_min_c=-10,
            temp_max_c=40,
            rain_max_mm=100,
            snow_max_mm=100,
            wind_max_ms=100,
            uv_index_max=12,
            time_of_day=(MORNING, AFTERNOON, EVENING),
            physical_level=0.2,
            outdoor_preference=0.1,
            season=0.5,
        ),
    )


def create_indoor_climbing_activity() -> Activity:
    """Create the indoor rock climbing activity."""
    return Activity(
        id="4",
        name="Indoor Rock Climbing",
        description="Challenge yourself with indoor rock climbing at a local gym.",
        category=ActivityCategory.INDOOR,
        tags=("sport", "climbing", "exercise", "challenge"),
        suitability=Suitability(
            temp_min_c=-10,
            temp_max_c=40,
            rain_max_mm=100,
            snow_max_mm=100,
            wind_max_ms=100,
            uv_index_max=12,
            time_of_day=(MORNING, AFTERNOON, EVENING),
            physical_level=0.8,
            outdoor_preference=0.3,
            season=0.5,
        ),
    )


def create_picnic_activity() -> Activity:
    """Create the picnic in the park activity."""
    return Activity(
        id="5",
        name="Picnic in the Park",
        description="Enjoy a relaxing picnic with food and drinks in a local park.",
        category=ActivityCategory.OUTDOOR,
        tags=("food", "relaxation", "nature", "social"),
        suitability=Suitability(
            temp_min_c=15,
            temp_max_c=30,
            rain_max_mm=0,
            snow_max_mm=0,
            wind_max_ms=15,
            uv_index_max=6,
            time_of_day=(MORNING, AFTERNOON),
            physical_level=0.2,
            outdoor_preference=0.7,
            season=0.9,
        ),
    )


def create_movie_marathon_activity() -> Activity:
    """Create the movie marathon activity (any weather)."""
    return Activity(
        id="6",
        name="Movie Marathon",
        description="Stay in and enjoy a marathon of your favorite movies or TV shows.",
        category=ActivityCategory.INDOOR,
        tags=("entertainment", "relaxation", "movies", "social"),
        suitability=Suitability(
            temp_min_c=-30,
            temp_max_c=45,
            rain_max_mm=100,
            snow_max_mm=100,
            wind_max_ms=100,
            uv_index_max=12,
            time_of_day=(AFTERNOON, EVENING, NIGHT),
            physical_level=0.1,
            outdoor_preference=0.0,
            season=0.5,
        ),
    )


def create_cycling_activity() -> Activity:
    """Create the cycling activity."""
    return Activity(
        id="7",
        name="Cycling",
        description="Go for a bike ride through scenic routes and trails.",
        category=ActivityCategory.OUTDOOR,
        tags=("sport", "biking", "exercise", "nature"),
        suitability=Suitability(
            temp_min_c=10,
            temp_max_c=30,
            rain_max_mm=0,  # Wet roads are dangerous
            snow_max_mm=0,
            wind_max_ms=20,
            uv_index_max=6,
            time_of_day=(MORNING, AFTERNOON),
            physical_level=0.6,
            outdoor_preference=0.8,
            season=0.7,
        ),
    )


def create_cooking_class_activity() -> Activity:
    """Create the cooking class activity."""
    return Activity(
        id="8",
        name="Cooking Class",
        description="Learn new recipes and cooking techniques in a cooking class.",
        category=ActivityCategory.INDOOR,
        tags=("food", "cooking", "learning", "social"),
        suitability=Suitability(
            temp_min_c=-10,
            temp_max_c=40,
            rain_max_mm=100,
            snow_max_mm=100,
            wind_max_ms=100,
            uv_index_max=12,
            time_of_day=(MORNING, AFTERNOON, EVENING),
            physical_level=0.3,
            outdoor_preference=0.2,
            season=0.5,
        ),
    )


def create_stargazing_activity() -> Activity:
    """Create the stargazing activity (clear, calm nights only)."""
    return Activity(
        id="9",
        name="Stargazing",
        description="Observe stars, planets, and constellations in the night sky.",
        category=ActivityCategory.OUTDOOR,
        tags=("astronomy", "night", "relaxation", "nature"),
        suitability=Suitability(
            temp_min_c=5,
            temp_max_c=25,
            rain_max_mm=0,
            snow_max_mm=5,
            wind_max_ms=10,  # Wind shakes the telescope
            uv_index_max=1,
            time_of_day=(NIGHT,),
            physical_level=0.2,
            outdoor_preference=0.6,
            season=0.6,
        ),
    )


def create_coffee_shop_activity() -> Activity:
    """Create the coffee shop work/study activity."""
    return Activity(
        id="10",
        name="Coffee Shop Work/Study",
        description="Change your environment by working or studying at a cozy coffee shop.",
        category=ActivityCategory.INDOOR,
        tags=("work", "coffee", "study", "productivity"),
        suitability=Suitability(
            temp_min_c=-10,
            temp_max_c=40,
            rain_max_mm=100,
            snow_max_mm=100,
            wind_max_ms=100,
            uv_index_max=12,
            time_of_day=(MORNING, AFTERNOON),
            physical_level=0.1,
            outdoor_preference=0.3,
            season=0.5,
        ),
    )


DEFAULT_CATALOG = ActivityCatalog(
    [
        create_beach_day_activity(),
        create_hiking_activity(),
        create_museum_visit_activity(),
        create_indoor_climbing_activity(),
        create_picnic_activity(),
        create_movie_marathon_activity(),
        create_cycling_activity(),
        create_cooking_class_activity(),
        create_stargazing_activity(),
        create_coffee_shop_activity(),
    ]
)
