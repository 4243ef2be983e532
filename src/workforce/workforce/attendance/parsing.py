from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import parse_iso_date, parse_optional_timestamp
from .model import DayRecord

logger = logging.getLogger(__name__)


def _first(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def parse_day_record(raw: Any) -> Optional[DayRecord]:
    """Build a DayRecord from an API/DB row, or ``None`` if it has no usable date."""
    if isinstance(raw, DayRecord):
        try:
            work_date = parse_iso_date(raw.work_date)
        except (TypeError, ValueError):
            logger.warning("Skipping attendance record with unparseable date %r", raw.work_date)
            return None
        return replace(raw, work_date=work_date)
    if not isinstance(raw, Mapping):
        logger.warning("Skipping attendance record of type %s", type(raw).__name__)
        return None

    value = _first(raw, "date", "work_date", "workDate")
    if value is None:
        logger.warning("Skipping attendance record without a date: %r", raw)
        return None
    try:
        work_date = parse_iso_date(value)
    except (TypeError, ValueError):
        logger.warning("Skipping attendance record with unparseable date %r", value)
        return None

    status = raw.get("status")
    return DayRecord(
        work_date=work_date,
        status=status if isinstance(status, str) else None,
        punch_in_time=parse_optional_timestamp(_first(raw, "punchInTime", "punch_in_time")),
        punch_out_time=parse_optional_timestamp(_first(raw, "punchOutTime", "punch_out_time")),
    )


def parse_day_records(items: Optional[Iterable[Any]]) -> list[DayRecord]:
    records = []
    for raw in items or ():
        record = parse_day_record(raw)
        if record is not None:
            records.append(record)
    return records
