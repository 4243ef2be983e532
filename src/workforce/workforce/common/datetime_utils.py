from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Tuple, Union

DateLike = Union[date, datetime, str]


def parse_iso_date(value: DateLike) -> date:
    """Parse a calendar date out of a date, datetime or ISO-8601 string.

    Time-of-day and UTC offsets are ignored: ``2025-06-02T23:30:00Z`` is
    June 2nd.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Unsupported date value type: {type(value)!r}")

    text = value.strip()
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        pass
    # Full timestamps as returned by the attendance API, e.g. 2025-06-02T09:12:00.000Z
    return datetime.fromisoformat(text.replace("Z", "+00:00")).date()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def iter_month_days(year: int, month: int) -> Iterator[date]:
    current = date(year, month, 1)
    for _ in range(days_in_month(year, month)):
        yield current
        current += timedelta(days=1)


def is_sunday(day: date) -> bool:
    return day.weekday() == calendar.SUNDAY


def is_saturday(day: date) -> bool:
    return day.weekday() == calendar.SATURDAY


def saturday_ordinal(day: date) -> int:
    """1-based position of ``day`` among the same weekdays of its month."""
    return (day.day - 1) // 7 + 1


def parse_optional_timestamp(value) -> Optional[datetime]:
    """Best-effort parse of a punch timestamp; ``None`` when absent or unreadable."""
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    return date(year, month, 1), date(year, month, days_in_month(year, month))
