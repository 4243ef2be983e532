from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Optional, Sequence

from ...attendance.model import DayRecord
from ...attendance.parsing import parse_day_records
from ...common.datetime_utils import iter_month_days
from ...common.validators import require_month, require_year
from ...core.enums import DayStatus, HolidayRule
from ...holidays.base import HolidayPolicy
from ...holidays.factory import HolidayPolicyFactory
from ...leave.model import LeaveInterval
from ...leave.parsing import parse_leave_intervals
from ..model import DayClassification, MonthlyAttendanceGrid
from .base import GridCalculator

PAYABLE_STATUSES = (DayStatus.PRESENT, DayStatus.LEAVE)


class StandardGridCalculator(GridCalculator):
    """Standard rule, evaluated per day in this order: Holiday, Leave, Present, Absent.

    Holidays are decided by the configured policy (default: Sundays and the
    2nd/4th Saturday of the month). Only ``Approved`` leave counts and only
    ``Present``/``P`` attendance counts; payable days are Present + Leave.
    """

    def __init__(self, holiday_policy: Optional[HolidayPolicy] = None):
        self._holidays = holiday_policy or HolidayPolicyFactory().for_rule(HolidayRule.SECOND_FOURTH_SATURDAY)

    def classify_day(
        self,
        day: date,
        present_dates: frozenset,
        approved_leaves: Sequence[LeaveInterval],
    ) -> DayStatus:
        if self._holidays.is_holiday(day):
            return DayStatus.HOLIDAY
        if any(interval.covers(day) for interval in approved_leaves):
            return DayStatus.LEAVE
        if day in present_dates:
            return DayStatus.PRESENT
        return DayStatus.ABSENT

    def compute_monthly_grid(
        self,
        year: int,
        month: int,
        attendance_records: Iterable[Any],
        leave_intervals: Iterable[Any],
    ) -> MonthlyAttendanceGrid:
        month = require_month(month)
        year = require_year(year)

        records: list[DayRecord] = parse_day_records(attendance_records)
        # Several records on one date: any Present/P one wins.
        present_dates = frozenset(r.work_date for r in records if r.is_present)
        approved = [i for i in parse_leave_intervals(leave_intervals) if i.is_approved]

        days = tuple(
            DayClassification(date=day, day_index=day.day, status=self.classify_day(day, present_dates, approved))
            for day in iter_month_days(year, month)
        )
        total_payable = sum(1 for d in days if d.status in PAYABLE_STATUSES)
        return MonthlyAttendanceGrid(year=year, month=month, days=days, total_payable=total_payable)


_default_calculator = StandardGridCalculator()


def compute_monthly_grid(
    year: int,
    month: int,
    attendance_records: Iterable[Any] = (),
    leave_intervals: Iterable[Any] = (),
) -> MonthlyAttendanceGrid:
    """Classify every day of ``year``/``month`` with the default holiday rule."""
    return _default_calculator.compute_monthly_grid(year, month, attendance_records, leave_intervals)
