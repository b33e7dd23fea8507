"""Supabase-backed profile repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from weight_tracker.adapters.supabase_rows import (
    execute,
    parse_optional_timestamp,
    parse_timestamp,
)
from weight_tracker.domain.errors import StoreError
from weight_tracker.domain.models import UserProfile
from weight_tracker.services.profiles import ProfileRepository

_COLUMNS = "id, name, start_weight, goal_weight, start_date, target_date"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def create_profile(
        self,
        name: str,
        start_weight: float,
        goal_weight: float | None,
        target_date: datetime | None,
    ) -> UserProfile:
        """Insert a profile row and return it."""
        response = execute(
            self.client.table("user_profiles").insert(
                {
                    "name": name,
                    "start_weight": start_weight,
                    "goal_weight": goal_weight,
                    "target_date": target_date.isoformat() if target_date else None,
                }
            ),
            "create user profile",
        )
        if not response.data:
            raise StoreError("Failed to create user profile")
        return _parse_profile(response.data[0])

    def get_profile(self, profile_id: int) -> UserProfile | None:
        """Return a profile by id, if present."""
        response = execute(
            self.client.table("user_profiles")
            .select(_COLUMNS)
            .eq("id", profile_id)
            .limit(1),
            "fetch user profile",
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def delete_profile(self, profile_id: int) -> bool:
        """Delete a profile; entries are removed by the foreign key cascade."""
        response = execute(
            self.client.table("user_profiles").delete().eq("id", profile_id),
            "delete user profile",
        )
        return bool(response.data)

    def ping(self) -> None:
        """Run a trivial select against the profile table."""
        execute(
            self.client.table("user_profiles").select("id").limit(1),
            "reach the database",
        )


def _parse_profile(row: dict[str, object]) -> UserProfile:
    goal = row.get("goal_weight")
    return UserProfile(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        start_weight=float(row["start_weight"]),
        goal_weight=float(goal) if goal is not None else None,
        start_date=parse_timestamp(row.get("start_date")),
        target_date=parse_optional_timestamp(row.get("target_date")),
    )
