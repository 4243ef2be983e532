from __future__ import annotations

from typing import Protocol, Sequence

from .model import DayRecord


class AttendanceSource(Protocol):
    def get_month_records(self, employee_id: str, year: int, month: int) -> Sequence[DayRecord]:
        raise NotImplementedError

    def list_employee_ids(self, year: int, month: int) -> Sequence[str]:
        """Employees having at least one attendance record in the month."""

        raise NotImplementedError
