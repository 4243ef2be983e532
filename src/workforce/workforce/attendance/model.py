from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.constants import PRESENT_STATUS_CODES


@dataclass(frozen=True)
class DayRecord:
    """One raw attendance entry of an employee for a calendar date.

    Punch times are informational only; payable status comes from ``status``.
    """

    work_date: date
    status: Optional[str]
    punch_in_time: Optional[datetime] = None
    punch_out_time: Optional[datetime] = None

    @property
    def is_present(self) -> bool:
        return self.status in PRESENT_STATUS_CODES
