"""Recommendation result models."""

from __future__ import annotations

from dataclasses import dataclass, field

from activity_recommender.models.activity import Activity


@dataclass(frozen=True)
class ScoreFactor:
    """A single multiplier applied to an activity's score."""

    name: str
    multiplier: float


@dataclass
class ScoredActivity:
    """An activity that passed the weather filter, with its final score.

    ``activity`` is the catalog instance itself, not a copy.
    """

    activity: Activity
    score: float = 1.0
    factors: list[ScoreFactor] = field(default_factory=list)

    def apply(self, name: str, multiplier: float) -> None:
        """Multiply the score by a factor and record it."""
        self.score *= multiplier
        self.factors.append(ScoreFactor(name=name, multiplier=multiplier))


@dataclass
class FilterResult:
    """Outcome of checking one activity against the hard constraints."""

    activity: Activity
    failures: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """True if no constraint failed."""
        return not self.failures
