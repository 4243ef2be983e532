from __future__ import annotations

from datetime import date

import pytest

from src.workforce.workforce.attendance.model import DayRecord
from src.workforce.workforce.core.enums import DayStatus
from src.workforce.workforce.core.exceptions import InvalidMonthError
from src.workforce.workforce.leave.model import LeaveInterval
from src.workforce.workforce.payroll.service import PayrollReportService, attendance_rate, grid_row_ui


class FakeAttendanceSource:
    def __init__(self, records_by_employee):
        self._records = records_by_employee
        self.last_args = None

    def get_month_records(self, employee_id, year, month):
        self.last_args = {"employee_id": employee_id, "year": year, "month": month}
        return [r for r in self._records.get(employee_id, []) if (r.work_date.year, r.work_date.month) == (year, month)]

    def list_employee_ids(self, year, month):
        return sorted(self._records)


class FakeLeaveSource:
    def __init__(self, intervals_by_employee):
        self._intervals = intervals_by_employee
        self.last_args = None

    def get_intervals_overlapping(self, employee_id, start, end):
        self.last_args = {"employee_id": employee_id, "start": start, "end": end}
        return [i for i in self._intervals.get(employee_id, []) if i.start_date <= end and i.end_date >= start]


def present(day: int) -> DayRecord:
    return DayRecord(work_date=date(2025, 6, day), status="Present")


@pytest.fixture
def service():
    attendance = FakeAttendanceSource(
        {
            "EMP001": [present(2), present(3), present(4)],
            "EMP002": [present(2)],
        }
    )
    leaves = FakeLeaveSource(
        {
            "EMP002": [
                LeaveInterval(start_date=date(2025, 5, 30), end_date=date(2025, 6, 6), status="Approved"),
                LeaveInterval(start_date=date(2025, 6, 9), end_date=date(2025, 6, 9), status="Rejected"),
            ]
        }
    )
    return PayrollReportService(attendance, leaves)


def test_employee_grid_queries_whole_month(service):
    grid = service.employee_grid("EMP002", 2025, 6)

    assert service._leaves.last_args == {"employee_id": "EMP002", "start": date(2025, 6, 1), "end": date(2025, 6, 30)}
    assert service._attendance.last_args == {"employee_id": "EMP002", "year": 2025, "month": 6}
    # June 2..6 on leave (June 2 also present), June 9 rejected leave
    assert grid.count(DayStatus.LEAVE) == 5
    assert grid.days[8].status == DayStatus.ABSENT
    assert grid.total_payable == 5


def test_employee_grid_rejects_bad_month(service):
    with pytest.raises(InvalidMonthError):
        service.employee_grid("EMP001", 2025, 13)


def test_monthly_summary_sorted_by_payable(service):
    rows = service.monthly_summary(2025, 6)

    assert [r.employee_id for r in rows] == ["EMP002", "EMP001"]
    emp1 = rows[1]
    assert (emp1.present, emp1.leave, emp1.holiday, emp1.total_payable) == (3, 0, 7, 3)
    assert emp1.absent == 20
    assert emp1.attendance_rate == "13.04"


def test_attendance_rate_without_working_days():
    assert attendance_rate(0, 0) == "0.00"
    assert attendance_rate(3, 1) == "75.00"


def test_grid_row_ui_uses_legend_codes(service):
    rows = grid_row_ui(service.employee_grid("EMP001", 2025, 6))

    assert rows[0]["code"] == "H"
    assert rows[1] == {"dayIndex": 2, "date": "2025-06-02", "status": "Present", "code": "P"}
    assert rows[4]["code"] == "A"
