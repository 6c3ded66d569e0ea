from datetime import date, datetime, time, timedelta
from typing import NamedTuple

from weekly_goals.core.config import settings

# Offset from Monday 00:00 to the last millisecond of Sunday
WEEK_END_OFFSET = timedelta(days=6, hours=23, minutes=59, seconds=59, milliseconds=999)


class WeekBoundary(NamedTuple):
    week_start: datetime
    week_end: datetime


def now_local(tz_name: str | None = None) -> datetime:
    """Current wall-clock time as a naive datetime in the configured timezone.

    - If `tz_name` is 'local' or None: use system local timezone.
    - Otherwise `tz_name` is an IANA name (e.g., 'America/New_York').

    Week boundaries are stored naive, so the tzinfo is dropped after converting.
    """
    tz_name = tz_name or settings.timezone
    if tz_name and tz_name != "local":
        from zoneinfo import ZoneInfo

        return datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)
    return datetime.now()


def get_week_boundaries(d: date | datetime | None = None) -> WeekBoundary:
    """
    Monday 00:00:00.000 -> Sunday 23:59:59.999 week containing `d`.
    Example: Sunday 2025-01-12 -> (2025-01-06 00:00, 2025-01-12 23:59:59.999)
    """
    if d is None:
        d = now_local()
    if isinstance(d, datetime):
        d = d.date()

    # Monday = 0, Sunday = 6, so Sunday falls back to the Monday before it
    monday = d - timedelta(days=d.weekday())
    week_start = datetime.combine(monday, time.min)
    return WeekBoundary(week_start, week_start + WEEK_END_OFFSET)


def get_last_n_weeks(n: int, now: datetime | None = None) -> list[WeekBoundary]:
    """
    Boundaries of the last `n` weeks, oldest first, ending with the week
    containing `now`. Callers enforce any upper bound.
    """
    if n < 1:
        raise ValueError("n must be a positive integer")
    if now is None:
        now = now_local()

    return [get_week_boundaries(now - timedelta(days=7 * i)) for i in range(n - 1, -1, -1)]


def is_current_week(d: date | datetime, now: datetime | None = None) -> bool:
    """True if `d` falls inside the week containing `now`."""
    week_start, week_end = get_week_boundaries(now)
    if not isinstance(d, datetime):
        d = datetime.combine(d, time.min)
    return week_start <= d <= week_end
