"""Request models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, Field


class ProfileCreate(BaseModel):
    """Payload for profile setup."""

    name: str = Field(min_length=1)
    start_weight: float
    goal_weight: float | None = None
    target_weeks: int | None = None


class EntryCreate(BaseModel):
    """Payload for logging today's weight."""

    weight: float
    note: str | None = None


class EntryUpdate(BaseModel):
    """Payload for editing an entry."""

    weight: float
    note: str | None = None
    date: datetime | None = None
