"""User preference model consumed by the recommendation engine."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from activity_recommender.models.weather import TimeOfDay


class PreferredTimeOfDay(str, Enum):
    """Time of day a user wants to plan for."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    ANY = "any"


class UserPreferences(BaseModel):
    """Tunable preferences for scoring activities.

    Every field is optional. A missing scalar or an empty tag list leaves the
    corresponding scoring factor neutral. A tag may appear in both
    ``favorite_activities`` and ``disliked_activities``; the engine then
    applies both multipliers. Use ``with_favorite_toggled`` and
    ``with_disliked_toggled`` to edit the lists while keeping them exclusive.
    """

    outdoor_preference: float | None = Field(
        default=None, ge=0, le=1, description="0=indoor only, 1=outdoor only"
    )
    physical_level: float | None = Field(
        default=None, ge=0, le=1, description="Preferred physical exertion (0-1)"
    )
    favorite_activities: list[str] = Field(
        default_factory=list, description="Tags the user likes"
    )
    disliked_activities: list[str] = Field(
        default_factory=list, description="Tags the user dislikes"
    )
    time_of_day: PreferredTimeOfDay | None = Field(
        default=None, description="Time of day to plan for (None means any)"
    )

    def concrete_time_of_day(self) -> TimeOfDay | None:
        """Get the requested time of day, or None when any time is fine."""
        if self.time_of_day is None or self.time_of_day == PreferredTimeOfDay.ANY:
            return None
        return TimeOfDay(self.time_of_day.value)

    def with_favorite_toggled(self, tag: str) -> UserPreferences:
        """Return a copy with ``tag`` added to or removed from favorites.

        Adding a favorite removes the tag from the disliked list.
        """
        favorites = list(self.favorite_activities)
        disliked = list(self.disliked_activities)
        if tag in favorites:
            favorites.remove(tag)
        else:
            if tag in disliked:
                disliked.remove(tag)
            favorites.append(tag)
        return self.model_copy(
            update={"favorite_activities": favorites, "disliked_activities": disliked}
        )

    def with_disliked_toggled(self, tag: str) -> UserPreferences:
        """Return a copy with ``tag`` added to or removed from dislikes.

        Adding a dislike removes the tag from the favorites list.
        """
        favorites = list(self.favorite_activities)
        disliked = list(self.disliked_activities)
        if tag in disliked:
            disliked.remove(tag)
        else:
            if tag in favorites:
                favorites.remove(tag)
            disliked.append(tag)
        return self.model_copy(
            update={"favorite_activities": favorites, "disliked_activities": disliked}
        )


# Preferences a new user starts with
DEFAULT_PREFERENCES = UserPreferences(
    outdoor_preference=0.5,
    physical_level=0.5,
    favorite_activities=[],
    disliked_activities=[],
    time_of_day=PreferredTimeOfDay.ANY,
)
