from __future__ import annotations

from datetime import date, datetime, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/inject a fixed clock.
    """
    return datetime.now(tz=timezone.utc)


def to_epoch_seconds(value: datetime) -> int:
    return int(value.timestamp())


def format_iso_date(value: date) -> str:
    """Format date as YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")
