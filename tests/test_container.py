"""Tests for container wiring."""

import asyncio

from weight_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from weight_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    settings.timezone = "Europe/Berlin"

    container = build_container(settings)

    assert isinstance(container.entry_service.repository, SupabaseEntryRepository)
    assert container.entry_service.timezone_name == "Europe/Berlin"
    assert container.stats_service.timezone_name == "Europe/Berlin"
    assert container.profile_service.default_target_weeks == 12
    asyncio.run(container.close_resources())
