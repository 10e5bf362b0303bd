"""Common time utilities."""

from __future__ import annotations

import datetime as dt


def utcnow() -> dt.datetime:
    """Return an aware UTC timestamp for events that carry none."""
    return dt.datetime.now(dt.UTC)


def isoformat_utc(value: dt.datetime) -> str:
    """Render ``value`` as an ISO-8601 string in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.UTC)
    return value.astimezone(dt.UTC).isoformat()
