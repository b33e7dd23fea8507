"""Domain models for derived statistics."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class Stats:
    """Statistics derived from a profile's entries."""

    current_weight: float
    total_change: float
    days_tracked: int
    weekly_trend: float
    goal_progress: float
    streak: int
    start_weight: float
    goal_weight: float | None
    remaining_to_goal: float | None
    entry_count: int
    latest_entry_date: datetime


@dataclass(frozen=True)
class ChartPoint:
    """Single point of the weight time series."""

    day: date
    weight: float
    label: str
