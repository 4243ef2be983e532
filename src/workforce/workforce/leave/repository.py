from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import LeaveInterval


class LeaveSource(Protocol):
    def get_intervals_overlapping(self, employee_id: str, start: date, end: date) -> Sequence[LeaveInterval]:
        """All leave intervals of the employee touching ``[start, end]``, any status."""

        raise NotImplementedError
