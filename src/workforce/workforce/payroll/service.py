from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..attendance.repository import AttendanceSource
from ..common.datetime_utils import month_bounds
from ..common.validators import require_month, require_year
from ..core.constants import DISPLAY_CODES
from ..core.enums import DayStatus
from ..leave.repository import LeaveSource
from .calculator.base import GridCalculator
from .calculator.standard_calculator import StandardGridCalculator
from .model import MonthlyAttendanceGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryRow:
    employee_id: str
    present: int
    absent: int
    leave: int
    holiday: int
    total_payable: int
    attendance_rate: str

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "present": self.present,
            "absent": self.absent,
            "leave": self.leave,
            "holiday": self.holiday,
            "totalPayable": self.total_payable,
            "attendanceRate": self.attendance_rate,
        }


def attendance_rate(present: int, absent: int) -> str:
    """Present share of working days as a percentage string, e.g. ``"86.36"``."""
    working_days = present + absent
    if working_days <= 0:
        return "0.00"
    return f"{present / working_days * 100:.2f}"


def grid_row_ui(grid: MonthlyAttendanceGrid) -> list[dict]:
    """Single-letter legend codes (P/A/L/H) for table rendering."""
    return [
        {
            "dayIndex": d.day_index,
            "date": d.date.isoformat(),
            "status": d.status.value,
            "code": DISPLAY_CODES[d.status],
        }
        for d in grid.days
    ]


class PayrollReportService:
    def __init__(
        self,
        attendance: AttendanceSource,
        leaves: LeaveSource,
        *,
        calculator: Optional[GridCalculator] = None,
    ):
        self._attendance = attendance
        self._leaves = leaves
        self._calculator = calculator or StandardGridCalculator()

    def employee_grid(self, employee_id: str, year: int, month: int) -> MonthlyAttendanceGrid:
        month = require_month(month)
        year = require_year(year)
        first, last = month_bounds(year, month)

        records = self._attendance.get_month_records(employee_id, year, month)
        intervals = self._leaves.get_intervals_overlapping(employee_id, first, last)
        grid = self._calculator.compute_monthly_grid(year, month, records, intervals)
        logger.debug(
            "Grid for employee %s %04d-%02d: %d payable of %d days",
            employee_id,
            year,
            month,
            grid.total_payable,
            len(grid.days),
        )
        return grid

    def monthly_summary(self, year: int, month: int) -> list[SummaryRow]:
        month = require_month(month)
        year = require_year(year)

        rows: list[SummaryRow] = []
        for employee_id in self._attendance.list_employee_ids(year, month):
            grid = self.employee_grid(employee_id, year, month)
            present = grid.count(DayStatus.PRESENT)
            absent = grid.count(DayStatus.ABSENT)
            rows.append(
                SummaryRow(
                    employee_id=str(employee_id),
                    present=present,
                    absent=absent,
                    leave=grid.count(DayStatus.LEAVE),
                    holiday=grid.count(DayStatus.HOLIDAY),
                    total_payable=grid.total_payable,
                    attendance_rate=attendance_rate(present, absent),
                )
            )

        rows.sort(key=lambda r: (-r.total_payable, r.employee_id))
        return rows
