"""Date helpers. All timestamps are stored as naive UTC."""

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_today() -> date:
    return utc_now().date()


def to_utc_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Half-open [start, end) window covering one UTC day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def range_bounds(start: Optional[date], end: Optional[date]) -> Tuple[datetime, datetime]:
    """Window for an inclusive date range. Missing ends default to today."""
    today = utc_today()
    start = start or end or today
    end = end or max(start, today)
    return datetime.combine(start, time.min), datetime.combine(end + timedelta(days=1), time.min)
