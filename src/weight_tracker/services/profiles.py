"""Profile setup and reset."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol

from weight_tracker.domain.errors import (
    InvalidInputError,
    ProfileNotFoundError,
    StoreError,
)
from weight_tracker.domain.models import UserProfile, WeightEntry
from weight_tracker.services.entries import EntryService, validate_weight

MIN_TARGET_WEEKS = 4
MAX_TARGET_WEEKS = 52

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def create_profile(
        self,
        name: str,
        start_weight: float,
        goal_weight: float | None,
        target_date: datetime | None,
    ) -> UserProfile:
        """Create and return a profile."""

    def get_profile(self, profile_id: int) -> UserProfile | None:
        """Return a profile by id, if present."""

    def delete_profile(self, profile_id: int) -> bool:
        """Delete a profile and its entries; return False when nothing matched."""

    def ping(self) -> None:
        """Run a trivial query; raise when the store is unreachable."""


@dataclass(frozen=True)
class SetupResult:
    """Profile and starting entry created by setup."""

    profile: UserProfile
    entry: WeightEntry


@dataclass
class ProfileService:
    """Application service for the profile lifecycle."""

    repository: ProfileRepository
    entry_service: EntryService
    default_target_weeks: int = 12

    def setup(
        self,
        name: str,
        start_weight: float,
        goal_weight: float | None = None,
        target_weeks: int | None = None,
    ) -> SetupResult:
        """Create a profile and its starting-point entry."""
        cleaned_name = (name or "").strip()
        if not cleaned_name:
            raise InvalidInputError("Name is required")
        start = validate_weight(start_weight, "Start weight")
        goal = None
        if goal_weight is not None:
            goal = validate_weight(goal_weight, "Goal weight")
        weeks = self.default_target_weeks if target_weeks is None else target_weeks
        if not MIN_TARGET_WEEKS <= weeks <= MAX_TARGET_WEEKS:
            raise InvalidInputError(
                f"Target weeks must be between {MIN_TARGET_WEEKS} and "
                f"{MAX_TARGET_WEEKS}"
            )

        target_date = self.entry_service.clock() + timedelta(weeks=weeks)
        profile = self.repository.create_profile(
            name=cleaned_name,
            start_weight=start,
            goal_weight=goal,
            target_date=target_date,
        )
        try:
            entry = self.entry_service.create_initial_entry(profile.id, start)
        except StoreError:
            _logger.warning("Initial entry failed, removing profile %s", profile.id)
            self._discard(profile.id)
            raise
        _logger.info("Created profile %s", profile.id)
        return SetupResult(profile=profile, entry=entry)

    def get_profile(self, profile_id: int) -> UserProfile:
        """Return a profile or raise ``ProfileNotFoundError``."""
        profile = self.repository.get_profile(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile

    def reset(self, profile_id: int) -> None:
        """Delete a profile together with all of its entries."""
        if not self.repository.delete_profile(profile_id):
            raise ProfileNotFoundError(profile_id)
        _logger.info("Reset profile %s", profile_id)

    def check_store(self) -> bool:
        """Return True when the store answers a trivial query."""
        try:
            self.repository.ping()
        except StoreError:
            _logger.exception("Store connectivity check failed")
            return False
        return True

    def _discard(self, profile_id: int) -> None:
        try:
            self.repository.delete_profile(profile_id)
        except StoreError:
            _logger.exception(
                "Failed to remove profile %s after setup failure", profile_id
            )

