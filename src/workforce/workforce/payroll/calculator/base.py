from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable

from ..model import MonthlyAttendanceGrid


class GridCalculator(ABC):
    """Calculator interface (Strategy Pattern for payable-day grids)."""

    @abstractmethod
    def compute_monthly_grid(
        self,
        year: int,
        month: int,
        attendance_records: Iterable[Any],
        leave_intervals: Iterable[Any],
    ) -> MonthlyAttendanceGrid:
        raise NotImplementedError
