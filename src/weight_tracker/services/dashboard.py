"""Dashboard view for the selected profile."""

import logging
from dataclasses import dataclass
from zoneinfo import ZoneInfo

from weight_tracker.domain.days import local_day
from weight_tracker.domain.errors import ProfileNotFoundError
from weight_tracker.domain.models import UserProfile, WeightEntry
from weight_tracker.domain.motivation import Motivation
from weight_tracker.domain.session import SessionContext
from weight_tracker.domain.stats import ChartPoint, Stats
from weight_tracker.services.entries import EntryService
from weight_tracker.services.motivation import MotivationService
from weight_tracker.services.profiles import ProfileService, SetupResult
from weight_tracker.services.stats import chart_points, compute_stats

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardView:
    """Everything the presentation layer shows for one profile."""

    profile: UserProfile
    entries: list[WeightEntry]
    stats: Stats | None
    motivation: Motivation | None
    logged_today: bool
    chart: list[ChartPoint]


@dataclass
class DashboardService:
    """Assembles the dashboard from one fetch of profile and entries."""

    profile_service: ProfileService
    entry_service: EntryService
    motivation_service: MotivationService

    def setup(  # noqa: PLR0913
        self,
        session: SessionContext,
        name: str,
        start_weight: float,
        goal_weight: float | None = None,
        target_weeks: int | None = None,
    ) -> SetupResult:
        """Create a profile and bind the session to it."""
        result = self.profile_service.setup(
            name, start_weight, goal_weight=goal_weight, target_weeks=target_weeks
        )
        session.bind(result.profile.id)
        return result

    def select(self, session: SessionContext, profile_id: int) -> UserProfile:
        """Bind the session to an existing profile."""
        profile = self.profile_service.get_profile(profile_id)
        session.bind(profile.id)
        return profile

    def load(self, session: SessionContext) -> DashboardView | None:
        """Return the dashboard for the bound profile.

        Clears the session when the store no longer knows the profile.
        """
        if not session.is_bound:
            return None
        profile_id = session.require()
        try:
            profile = self.profile_service.get_profile(profile_id)
        except ProfileNotFoundError:
            _logger.info("Profile %s is gone, clearing session", profile_id)
            session.clear()
            return None

        tz = self.entry_service.tz
        entries = self.entry_service.list_entries(profile_id)
        today = local_day(self.entry_service.clock(), tz)
        logged_today = any(local_day(entry.date, tz) == today for entry in entries)
        stats = compute_stats(entries, profile, tz)
        return DashboardView(
            profile=profile,
            entries=entries,
            stats=stats,
            motivation=self.motivation_service.motivate(stats, profile, logged_today),
            logged_today=logged_today,
            chart=chart_points(entries, tz),
        )

    def refresh_motivation(self, session: SessionContext) -> Motivation | None:
        """Draw a new message for the bound profile."""
        view = self.load(session)
        if view is None:
            return None
        return view.motivation

    def reset(self, session: SessionContext) -> None:
        """Delete the bound profile and clear the session."""
        profile_id = session.require()
        self.profile_service.reset(profile_id)
        session.clear()
