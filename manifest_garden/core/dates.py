"""Clock helpers.

Timestamps are stored as naive UTC.  Calendar dates (journal days, week
keys, quest expiry) follow the configured local time zone.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from manifest_garden.core.config import settings


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def local_zone() -> ZoneInfo:
    return ZoneInfo(settings.timezone)


def local_today() -> date:
    return datetime.now(local_zone()).date()


def week_start(day: Optional[date] = None) -> date:
    """Return the Monday of the week containing *day*."""
    day = day or local_today()
    return day - timedelta(days=day.weekday())


def next_local_midnight(now: Optional[datetime] = None) -> datetime:
    """Next midnight in the local zone, as naive UTC."""
    now = now or utcnow()
    local = now.replace(tzinfo=timezone.utc).astimezone(local_zone())
    midnight = datetime.combine(local.date() + timedelta(days=1), time.min, tzinfo=local_zone())
    return midnight.astimezone(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Convert an offset-aware timestamp to naive UTC; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
