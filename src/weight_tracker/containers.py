"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from weight_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from weight_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from weight_tracker.config import Settings
from weight_tracker.services.dashboard import DashboardService
from weight_tracker.services.entries import EntryService
from weight_tracker.services.motivation import MotivationService
from weight_tracker.services.profiles import ProfileService
from weight_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    entry_service: EntryService
    stats_service: StatsService
    motivation_service: MotivationService
    dashboard_service: DashboardService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_repository = SupabaseProfileRepository(supabase_client)
    entry_repository = SupabaseEntryRepository(supabase_client)
    entry_service = EntryService(
        entry_repository, timezone_name=resolved_settings.timezone
    )
    profile_service = ProfileService(
        repository=profile_repository,
        entry_service=entry_service,
        default_target_weeks=resolved_settings.default_target_weeks,
    )
    stats_service = StatsService(
        profile_repository=profile_repository,
        entry_repository=entry_repository,
        timezone_name=resolved_settings.timezone,
    )
    motivation_service = MotivationService()
    dashboard_service = DashboardService(
        profile_service=profile_service,
        entry_service=entry_service,
        motivation_service=motivation_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        entry_service=entry_service,
        stats_service=stats_service,
        motivation_service=motivation_service,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
