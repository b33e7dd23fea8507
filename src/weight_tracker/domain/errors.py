"""Errors raised by the weight tracking core."""

from weight_tracker.domain.models import WeightEntry


class WeightTrackerError(Exception):
    """Base class for weight tracker errors."""


class InvalidInputError(WeightTrackerError, ValueError):
    """Raised when user input is rejected before reaching the store."""


class EntryCollisionError(WeightTrackerError):
    """Raised when a write would place two entries on one calendar day."""


class EntryAlreadyLoggedError(WeightTrackerError):
    """Raised when today already has an entry; callers should edit it instead."""

    def __init__(self, entry: WeightEntry) -> None:
        super().__init__(f"Entry {entry.id} already logged for today")
        self.entry = entry


class NotFoundError(WeightTrackerError):
    """Raised when the store does not know an identifier."""


class ProfileNotFoundError(NotFoundError):
    """Raised when a profile does not exist."""

    def __init__(self, profile_id: int | None) -> None:
        if profile_id is None:
            super().__init__("No profile selected")
        else:
            super().__init__(f"Profile {profile_id} not found")
        self.profile_id = profile_id


class EntryNotFoundError(NotFoundError):
    """Raised when an entry does not exist for the given profile."""

    def __init__(self, entry_id: int) -> None:
        super().__init__(f"Entry {entry_id} not found")
        self.entry_id = entry_id


class StoreError(WeightTrackerError, RuntimeError):
    """Raised when a store operation did not complete."""
