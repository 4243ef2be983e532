from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import APPROVED_LEAVE_STATUS


@dataclass(frozen=True)
class LeaveInterval:
    """Inclusive date range of a leave request."""

    start_date: date
    end_date: date
    status: Optional[str]

    @property
    def is_approved(self) -> bool:
        return self.status == APPROVED_LEAVE_STATUS

    @property
    def is_malformed(self) -> bool:
        return self.end_date < self.start_date

    def covers(self, day: date) -> bool:
        # A reversed range covers nothing.
        return self.start_date <= day <= self.end_date
