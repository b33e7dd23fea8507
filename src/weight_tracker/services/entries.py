"""Weight entry lifecycle rules."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from weight_tracker.domain.days import local_day, same_day
from weight_tracker.domain.errors import (
    EntryAlreadyLoggedError,
    EntryCollisionError,
    EntryNotFoundError,
    InvalidInputError,
)
from weight_tracker.domain.models import WeightEntry

STARTING_POINT_NOTE = "Starting point"

_logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for weight entries."""

    def create_entry(
        self,
        user_id: int,
        weight: float,
        note: str | None,
        date: datetime | None = None,
    ) -> WeightEntry:
        """Create an entry; the store stamps ``date`` with now when omitted."""

    def get_entry(self, entry_id: int) -> WeightEntry | None:
        """Return an entry by id, if present."""

    def list_entries(self, user_id: int) -> list[WeightEntry]:
        """Return a user's entries, newest first."""

    def update_entry(
        self,
        entry_id: int,
        weight: float,
        note: str | None,
        date: datetime | None = None,
    ) -> WeightEntry:
        """Update an entry and return the stored row."""

    def delete_entry(self, entry_id: int) -> bool:
        """Delete an entry; return False when nothing was deleted."""

    def delete_all_entries(self, user_id: int) -> None:
        """Delete every entry of a user."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def validate_weight(weight: float, label: str = "Weight") -> float:
    """Return the weight as a float or raise for non-finite or non-positive input."""
    try:
        value = float(weight)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{label} must be a number") from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(f"{label} must be a positive number")
    return value


@dataclass
class EntryService:
    """Mediates writes to weight entries, one entry per user per calendar day."""

    repository: EntryRepository
    timezone_name: str = "UTC"
    clock: Callable[[], datetime] = field(default=_utc_now)

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name)

    def list_entries(self, user_id: int) -> list[WeightEntry]:
        """Return a user's entries, newest first."""
        return self.repository.list_entries(user_id)

    def create_initial_entry(self, user_id: int, weight: float) -> WeightEntry:
        """Record the starting point of a freshly created profile."""
        value = validate_weight(weight)
        return self.repository.create_entry(user_id, value, STARTING_POINT_NOTE)

    def find_today(self, user_id: int) -> WeightEntry | None:
        """Return the entry on today's local date, if any."""
        today = local_day(self.clock(), self.tz)
        for entry in self.repository.list_entries(user_id):
            if local_day(entry.date, self.tz) == today:
                return entry
        return None

    def log_today(
        self, user_id: int, weight: float, note: str | None = None
    ) -> WeightEntry:
        """Create today's entry.

        Raises ``EntryAlreadyLoggedError`` with the existing entry when today
        is already logged; the caller is expected to edit that entry instead.
        """
        value = validate_weight(weight)
        existing = self.find_today(user_id)
        if existing is not None:
            raise EntryAlreadyLoggedError(existing)
        entry = self.repository.create_entry(
            user_id, value, _clean_note(note), date=self.clock()
        )
        _logger.info("Logged entry %s for profile %s", entry.id, user_id)
        return entry

    def record_today(
        self, user_id: int, weight: float, note: str | None = None
    ) -> tuple[WeightEntry, bool]:
        """Log today, editing today's entry when one exists.

        Returns the stored entry and whether it was newly created.
        """
        try:
            return self.log_today(user_id, weight, note), True
        except EntryAlreadyLoggedError as exc:
            updated = self.edit_entry(user_id, exc.entry.id, weight, note)
            return updated, False

    def edit_entry(  # noqa: PLR0913
        self,
        user_id: int,
        entry_id: int,
        weight: float,
        note: str | None = None,
        date: datetime | None = None,
    ) -> WeightEntry:
        """Update weight, note and optionally the date of an entry.

        ``note=None`` keeps the current note, an empty string clears it. A
        date without an offset is read as local time in the configured zone.
        """
        value = validate_weight(weight)
        current = self._get_owned(user_id, entry_id)
        if date is not None and date.tzinfo is None:
            date = date.replace(tzinfo=self.tz)
        if date is not None and not same_day(date, current.date, self.tz):
            self._ensure_day_free(user_id, entry_id, date)
        resolved_note = current.note if note is None else _clean_note(note)
        updated = self.repository.update_entry(entry_id, value, resolved_note, date)
        _logger.info("Updated entry %s for profile %s", entry_id, user_id)
        return updated

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        """Delete a user's entry; unknown ids raise ``EntryNotFoundError``."""
        self._get_owned(user_id, entry_id)
        if not self.repository.delete_entry(entry_id):
            raise EntryNotFoundError(entry_id)
        _logger.info("Deleted entry %s for profile %s", entry_id, user_id)

    def delete_all_entries(self, user_id: int) -> None:
        """Delete every entry of a user, keeping the profile."""
        self.repository.delete_all_entries(user_id)
        _logger.info("Deleted all entries for profile %s", user_id)

    def _ensure_day_free(self, user_id: int, entry_id: int, date: datetime) -> None:
        target_day = local_day(date, self.tz)
        for other in self.repository.list_entries(user_id):
            if other.id == entry_id:
                continue
            if local_day(other.date, self.tz) == target_day:
                raise EntryCollisionError(
                    f"An entry already exists on {target_day.isoformat()}"
                )

    def _get_owned(self, user_id: int, entry_id: int) -> WeightEntry:
        entry = self.repository.get_entry(entry_id)
        if entry is None or entry.user_id != user_id:
            raise EntryNotFoundError(entry_id)
        return entry


def _clean_note(note: str | None) -> str | None:
    if note is None:
        return None
    cleaned = note.strip()
    return cleaned or None
