from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Tuple

from ..core.enums import DayStatus


@dataclass(frozen=True)
class DayClassification:
    date: date
    day_index: int
    status: DayStatus


@dataclass(frozen=True)
class MonthlyAttendanceGrid:
    """Day-by-day payable status of one employee for one month."""

    year: int
    month: int
    days: Tuple[DayClassification, ...]
    total_payable: int

    def count(self, status: DayStatus) -> int:
        return sum(1 for d in self.days if d.status == status)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "days": [
                {
                    "dayIndex": d.day_index,
                    "date": d.date.isoformat(),
                    "status": d.status.value,
                }
                for d in self.days
            ],
            "totalPayable": self.total_payable,
        }
