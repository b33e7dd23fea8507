"""Supabase-backed weight entry repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from weight_tracker.adapters.supabase_rows import execute, parse_timestamp
from weight_tracker.domain.errors import StoreError
from weight_tracker.domain.models import WeightEntry
from weight_tracker.services.entries import EntryRepository

_COLUMNS = "id, user_id, date, weight, note, created_at"


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for weight entries."""

    client: Client

    def create_entry(
        self,
        user_id: int,
        weight: float,
        note: str | None,
        date: datetime | None = None,
    ) -> WeightEntry:
        """Insert an entry; the column default stamps the date when omitted."""
        payload: dict[str, object] = {
            "user_id": user_id,
            "weight": weight,
            "note": note,
        }
        if date is not None:
            payload["date"] = date.isoformat()
        response = execute(
            self.client.table("weight_entries").insert(payload),
            "create weight entry",
        )
        if not response.data:
            raise StoreError("Failed to create weight entry")
        return _parse_entry(response.data[0])

    def get_entry(self, entry_id: int) -> WeightEntry | None:
        """Return an entry by id."""
        response = execute(
            self.client.table("weight_entries")
            .select(_COLUMNS)
            .eq("id", entry_id)
            .limit(1),
            "fetch weight entry",
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def list_entries(self, user_id: int) -> list[WeightEntry]:
        """Return a user's entries, newest first."""
        response = execute(
            self.client.table("weight_entries")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("date", desc=True),
            "fetch weight entries",
        )
        return [_parse_entry(row) for row in response.data or []]

    def update_entry(
        self,
        entry_id: int,
        weight: float,
        note: str | None,
        date: datetime | None = None,
    ) -> WeightEntry:
        """Update an entry and return the stored row."""
        payload: dict[str, object] = {"weight": weight, "note": note}
        if date is not None:
            payload["date"] = date.isoformat()
        response = execute(
            self.client.table("weight_entries").update(payload).eq("id", entry_id),
            "update weight entry",
        )
        if not response.data:
            raise StoreError(f"Failed to update weight entry {entry_id}")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: int) -> bool:
        """Delete an entry by id."""
        response = execute(
            self.client.table("weight_entries").delete().eq("id", entry_id),
            "delete weight entry",
        )
        return bool(response.data)

    def delete_all_entries(self, user_id: int) -> None:
        """Delete every entry of a user."""
        execute(
            self.client.table("weight_entries").delete().eq("user_id", user_id),
            "delete weight entries",
        )


def _parse_entry(row: dict[str, object]) -> WeightEntry:
    note = row.get("note")
    return WeightEntry(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        date=parse_timestamp(row.get("date")),
        weight=float(row["weight"]),
        note=str(note) if note is not None else None,
        created_at=parse_timestamp(row.get("created_at")),
    )
