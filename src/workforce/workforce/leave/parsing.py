from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from .model import LeaveInterval

logger = logging.getLogger(__name__)


def parse_leave_interval(raw: Any) -> Optional[LeaveInterval]:
    """Build a LeaveInterval from an API/DB row, or ``None`` if a bound is unusable."""
    if isinstance(raw, LeaveInterval):
        start, end, status = raw.start_date, raw.end_date, raw.status
    elif isinstance(raw, Mapping):
        start = raw.get("startDate", raw.get("start_date"))
        end = raw.get("endDate", raw.get("end_date"))
        status = raw.get("status")
    else:
        logger.warning("Skipping leave interval of type %s", type(raw).__name__)
        return None

    if start is None or end is None:
        logger.warning("Skipping leave interval without start/end date: %r", raw)
        return None
    try:
        start_date = parse_iso_date(start)
        end_date = parse_iso_date(end)
    except (TypeError, ValueError):
        logger.warning("Skipping leave interval with unparseable dates %r..%r", start, end)
        return None
    interval = LeaveInterval(
        start_date=start_date,
        end_date=end_date,
        status=status if isinstance(status, str) else None,
    )

    if interval.is_malformed:
        logger.warning(
            "Leave interval ends before it starts (%s > %s); it covers no days",
            interval.start_date,
            interval.end_date,
        )
    return interval


def parse_leave_intervals(items: Optional[Iterable[Any]]) -> list[LeaveInterval]:
    intervals = []
    for raw in items or ():
        interval = parse_leave_interval(raw)
        if interval is not None:
            intervals.append(interval)
    return intervals
