from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Union

from ..core.enums import HolidayRule
from ..core.exceptions import ValidationError
from .base import HolidayPolicy
from .saturday_policy import SaturdayOrdinalPolicy

_SATURDAY_ORDINALS = {
    HolidayRule.SECOND_FOURTH_SATURDAY: (2, 4),
    HolidayRule.FOURTH_SATURDAY: (4,),
    HolidayRule.SUNDAY_ONLY: (),
}


@dataclass
class HolidayPolicyFactory:
    """Factory Pattern: build the holiday policy configured for payroll."""

    def for_rule(
        self,
        rule: Union[HolidayRule, str] = HolidayRule.SECOND_FOURTH_SATURDAY,
        *,
        extra_holidays: Iterable[date] = (),
    ) -> HolidayPolicy:
        try:
            rule = HolidayRule(rule)
        except ValueError:
            raise ValidationError(f"Unknown holiday rule: {rule!r}") from None
        return SaturdayOrdinalPolicy(_SATURDAY_ORDINALS[rule], extra_holidays=extra_holidays)
