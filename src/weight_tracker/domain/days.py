"""Calendar-day arithmetic shared by statistics and entry rules."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo


def local_day(moment: datetime, tz: ZoneInfo) -> date:
    """Return the calendar date of a timestamp in the given timezone.

    Naive timestamps are treated as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(tz).date()


def same_day(first: datetime, second: datetime, tz: ZoneInfo) -> bool:
    """Return True when both timestamps fall on the same local date."""
    return local_day(first, tz) == local_day(second, tz)


def days_apart(later: datetime, earlier: datetime, tz: ZoneInfo) -> int:
    """Return whole calendar days from ``earlier`` to ``later``."""
    return (local_day(later, tz) - local_day(earlier, tz)).days
