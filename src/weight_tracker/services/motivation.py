"""Motivational message selection."""

import random
from dataclasses import dataclass, field

from weight_tracker.domain.models import UserProfile
from weight_tracker.domain.motivation import Mood, Motivation
from weight_tracker.domain.stats import Stats

GOAL_ACHIEVED_MESSAGE = (
    "Goal reached! You hit {goal_weight:.1f} kg. Time to set a new target."
)

MESSAGE_POOLS: dict[Mood, tuple[str, ...]] = {
    Mood.CELEBRATE: (
        "Down {trend_abs:.1f} kg a week. You're on fire!",
        "{streak} days in a row and the scale keeps moving. Incredible!",
        "{goal_progress:.0f}% of the way there. Keep crushing it!",
    ),
    Mood.GOOD: (
        "Steady progress beats perfection. Nice work today.",
        "Another day logged. Consistency is your superpower.",
        "A {streak}-day streak. Habits are forming.",
    ),
    Mood.NEUTRAL: (
        "Step on the scale and log today's weight.",
        "Every entry tells the story. Add today's chapter.",
        "Small steps, big changes. Log your weight for today.",
    ),
    Mood.WARNING: (
        "Up {trend_abs:.1f} kg a week lately. Time to refocus.",
        "{remaining:.1f} kg to go. A small reset today gets you back on track.",
        "Trend is heading up. Check in with your habits this week.",
    ),
}


def choose_moods(
    stats: Stats, profile: UserProfile, logged_today: bool
) -> tuple[Mood, ...]:
    """Return the categories a message may be drawn from."""
    if not logged_today:
        return (Mood.NEUTRAL,)
    if profile.has_goal and stats.current_weight <= profile.goal_weight:
        return (Mood.GOAL_ACHIEVED,)
    if stats.weekly_trend < 0:
        return (Mood.CELEBRATE, Mood.GOOD)
    if stats.weekly_trend > 0 and profile.has_goal:
        return (Mood.WARNING,)
    return (Mood.GOOD, Mood.NEUTRAL)


def draw_template(moods: tuple[Mood, ...], rng: random.Random) -> tuple[Mood, str]:
    """Pick one template uniformly from the union of the given pools."""
    if moods == (Mood.GOAL_ACHIEVED,):
        return Mood.GOAL_ACHIEVED, GOAL_ACHIEVED_MESSAGE
    candidates = [
        (mood, template) for mood in moods for template in MESSAGE_POOLS[mood]
    ]
    return rng.choice(candidates)


def render(template: str, stats: Stats, profile: UserProfile) -> str:
    """Fill a template with the current numbers."""
    return template.format(
        streak=stats.streak,
        trend_abs=abs(stats.weekly_trend),
        goal_progress=stats.goal_progress,
        remaining=stats.remaining_to_goal or 0.0,
        goal_weight=profile.goal_weight or 0.0,
    )


@dataclass
class MotivationService:
    """Draws a message for the dashboard; repeated calls may differ."""

    rng: random.Random = field(default_factory=random.Random)

    def motivate(
        self, stats: Stats | None, profile: UserProfile | None, logged_today: bool
    ) -> Motivation | None:
        """Return a motivational message, or None without stats."""
        if stats is None or profile is None:
            return None
        moods = choose_moods(stats, profile, logged_today)
        mood, template = draw_template(moods, self.rng)
        return Motivation(mood=mood, message=render(template, stats, profile))
