"""Timezone helpers.

All timestamps written by the application are timezone-aware UTC.
"""

from datetime import date, datetime, timezone
from typing import Optional


def now_utc() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_long_date(value: date) -> str:
    """Format a date as 'January 2, 2006'."""
    return f"{value:%B} {value.day}, {value.year}"
