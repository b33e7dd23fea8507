"""Domain models for weight tracking."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserProfile:
    """A tracked person with a starting point and an optional goal."""

    id: int
    name: str
    start_weight: float
    goal_weight: float | None
    start_date: datetime
    target_date: datetime | None

    @property
    def has_goal(self) -> bool:
        """Return True when a goal weight is set."""
        return self.goal_weight is not None


@dataclass(frozen=True)
class WeightEntry:
    """One dated weight measurement belonging to a profile."""

    id: int
    user_id: int
    date: datetime
    weight: float
    note: str | None
    created_at: datetime
