"""Statistics over a profile's weight entries."""

from dataclasses import dataclass
from zoneinfo import ZoneInfo

from weight_tracker.domain.days import days_apart, local_day
from weight_tracker.domain.models import UserProfile, WeightEntry
from weight_tracker.domain.stats import ChartPoint, Stats
from weight_tracker.services.entries import EntryRepository
from weight_tracker.services.profiles import ProfileRepository

DAYS_PER_WEEK = 7
FULL_PROGRESS = 100.0


@dataclass
class StatsService:
    """Service for loading a profile's data and deriving statistics."""

    profile_repository: ProfileRepository
    entry_repository: EntryRepository
    timezone_name: str = "UTC"

    def get_stats(self, user_id: int) -> Stats | None:
        """Return stats for a user, or None without a profile or entries."""
        profile = self.profile_repository.get_profile(user_id)
        if profile is None:
            return None
        entries = self.entry_repository.list_entries(user_id)
        return compute_stats(entries, profile, ZoneInfo(self.timezone_name))

    def get_chart(self, user_id: int) -> list[ChartPoint]:
        """Return the weight series for a user, oldest first."""
        entries = self.entry_repository.list_entries(user_id)
        return chart_points(entries, ZoneInfo(self.timezone_name))


def compute_stats(
    entries: list[WeightEntry], profile: UserProfile | None, tz: ZoneInfo
) -> Stats | None:
    """Derive statistics from entries in any order."""
    if not entries or profile is None:
        return None

    ordered = sorted(entries, key=lambda entry: entry.date)
    earliest = ordered[0]
    latest = ordered[-1]
    total_change = latest.weight - earliest.weight
    days_tracked = max(days_apart(latest.date, earliest.date, tz), 1)
    weekly_trend = total_change / days_tracked * DAYS_PER_WEEK

    remaining = None
    if profile.has_goal:
        remaining = max(0.0, latest.weight - profile.goal_weight)

    return Stats(
        current_weight=latest.weight,
        total_change=total_change,
        days_tracked=days_tracked,
        weekly_trend=weekly_trend,
        goal_progress=goal_progress(profile, total_change),
        streak=streak_length(entries, tz),
        start_weight=profile.start_weight,
        goal_weight=profile.goal_weight,
        remaining_to_goal=remaining,
        entry_count=len(entries),
        latest_entry_date=latest.date,
    )


def goal_progress(profile: UserProfile, total_change: float) -> float:
    """Return the share of the planned loss achieved, within [0, 100]."""
    if not profile.has_goal or total_change >= 0:
        return 0.0
    planned = profile.start_weight - profile.goal_weight
    if planned <= 0:
        return FULL_PROGRESS
    return min(FULL_PROGRESS, abs(total_change) / planned * 100)


def streak_length(entries: list[WeightEntry], tz: ZoneInfo) -> int:
    """Count consecutive calendar days ending at the most recent entry."""
    if not entries:
        return 0
    ordered = sorted(entries, key=lambda entry: entry.date, reverse=True)
    streak = 1
    for newer, older in zip(ordered, ordered[1:], strict=False):
        if days_apart(newer.date, older.date, tz) != 1:
            break
        streak += 1
    return streak


def chart_points(entries: list[WeightEntry], tz: ZoneInfo) -> list[ChartPoint]:
    """Return entries as chart points, oldest first."""
    points = []
    for entry in sorted(entries, key=lambda item: item.date):
        day = local_day(entry.date, tz)
        points.append(
            ChartPoint(day=day, weight=entry.weight, label=day.strftime("%b %d"))
        )
    return points
