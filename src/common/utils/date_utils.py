"""Utility functions for date manipulation."""

from datetime import datetime, timedelta

import pytz


def utc_now() -> datetime:
    """Returns the current time as a timezone-aware UTC datetime."""
    return datetime.now(pytz.utc)


def expires_at(ttl_seconds: int, now: datetime | None = None) -> datetime:
    """Computes the UTC expiry timestamp for a cache entry living ttl_seconds."""
    start = now or utc_now()
    return start + timedelta(seconds=ttl_seconds)


def is_expired(expiry: datetime | None, now: datetime | None = None) -> bool:
    """An entry without expiry never expires."""
    if expiry is None:
        return False
    return (now or utc_now()) >= expiry
