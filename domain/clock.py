"""
Date and time helpers.

All timestamps are stored as naive UTC datetimes and "today" is the UTC
calendar date, so every request agrees on which day it is.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current UTC time without tzinfo (SQLite stores naive datetimes)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def today() -> date:
    return utc_now().date()


def next_week_start(reference: Optional[date] = None) -> date:
    """Date of the next Monday strictly after ``reference``.

    A Sunday rolls over to the following day; a Monday to the Monday after.
    """
    reference = reference or today()
    days_ahead = 7 - reference.weekday()
    return reference + timedelta(days=days_ahead)


def time_ago(created_at: datetime, now: Optional[datetime] = None) -> str:
    """Coarse relative age: whole days, else whole hours, else "Just now"."""
    now = now or utc_now()
    elapsed = now - created_at
    if elapsed.days >= 1:
        return f"{elapsed.days}d ago"
    hours = int(elapsed.total_seconds() // 3600)
    if hours >= 1:
        return f"{hours}h ago"
    return "Just now"
