"""Domain models for motivational messages."""

from dataclasses import dataclass
from enum import StrEnum


class Mood(StrEnum):
    """Message categories."""

    CELEBRATE = "celebrate"
    GOOD = "good"
    NEUTRAL = "neutral"
    WARNING = "warning"
    GOAL_ACHIEVED = "goal_achieved"


@dataclass(frozen=True)
class Motivation:
    """Rendered motivational message."""

    mood: Mood
    message: str
