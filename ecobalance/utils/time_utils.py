"""
Time helpers. All persisted timestamps are tz-aware UTC.
"""

from __future__ import annotations

from datetime import date, datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime with timezone info.

    Prefer this over ``datetime.utcnow()`` (which returns naive datetimes).
    """
    return datetime.now(tz=timezone.utc)


def utc_today() -> date:
    """Return today's calendar date in UTC."""
    return utcnow().date()
