"""Shared helpers for Supabase-backed repositories."""

from datetime import UTC, datetime
from typing import Any

import httpx
from postgrest.exceptions import APIError

from weight_tracker.domain.errors import StoreError


def execute(query: Any, action: str) -> Any:
    """Execute a PostgREST query, wrapping transport and API failures."""
    try:
        return query.execute()
    except (APIError, httpx.HTTPError) as exc:
        raise StoreError(f"Failed to {action}: {exc}") from exc


def parse_timestamp(raw: object) -> datetime:
    """Parse a timestamp column; naive values are treated as UTC."""
    if isinstance(raw, datetime):
        value = raw
    elif isinstance(raw, str) and raw:
        value = datetime.fromisoformat(raw)
    else:
        raise StoreError(f"Unexpected timestamp value: {raw!r}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value


def parse_optional_timestamp(raw: object) -> datetime | None:
    """Parse a nullable timestamp column."""
    if raw is None or raw == "":
        return None
    return parse_timestamp(raw)
