from __future__ import annotations

from datetime import date
from typing import Iterable

from ..common.datetime_utils import is_saturday, is_sunday, saturday_ordinal
from .base import HolidayPolicy


class SaturdayOrdinalPolicy(HolidayPolicy):
    """Every Sunday, selected Saturdays of the month, plus fixed calendar holidays."""

    def __init__(self, ordinals: Iterable[int], *, extra_holidays: Iterable[date] = ()):
        self._ordinals = frozenset(int(o) for o in ordinals)
        self._extra = frozenset(extra_holidays)

    @property
    def saturday_ordinals(self) -> frozenset[int]:
        return self._ordinals

    def is_holiday(self, day: date) -> bool:
        if is_sunday(day):
            return True
        if is_saturday(day) and saturday_ordinal(day) in self._ordinals:
            return True
        return day in self._extra
