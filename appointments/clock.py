"""Time helpers: localization, hour truncation and the default clock."""

from __future__ import annotations

from datetime import datetime, tzinfo

from appointments.config import settings


def localize(dt: datetime, tz: tzinfo | None = None) -> datetime:
    """Return ``dt`` as an aware datetime in ``tz`` (calendar timezone by default).

    Naive datetimes are taken as wall-clock time in ``tz``; aware ones are
    converted.
    """
    tz = tz or settings.tzinfo
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def start_of_hour(dt: datetime) -> datetime:
    """Truncate ``dt`` to the top of its hour."""
    return dt.replace(minute=0, second=0, microsecond=0)


def now() -> datetime:
    """Default "now" for the services; tests inject their own callable."""
    return datetime.now(tz=settings.tzinfo)
