from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class HolidayPolicy(ABC):
    """Strategy Pattern: decide whether a calendar date is a non-working holiday."""

    @abstractmethod
    def is_holiday(self, day: date) -> bool:
        raise NotImplementedError
