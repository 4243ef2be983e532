from datetime import date

import pytest

from src.workforce.workforce.core.enums import DayStatus, HolidayRule
from src.workforce.workforce.core.exceptions import ValidationError
from src.workforce.workforce.holidays.factory import HolidayPolicyFactory
from src.workforce.workforce.holidays.saturday_policy import SaturdayOrdinalPolicy
from src.workforce.workforce.payroll.calculator.standard_calculator import StandardGridCalculator


def test_factory_default_is_second_and_fourth_saturday():
    policy = HolidayPolicyFactory().for_rule()

    assert isinstance(policy, SaturdayOrdinalPolicy)
    assert policy.saturday_ordinals == frozenset({2, 4})


def test_every_sunday_is_a_holiday():
    policy = HolidayPolicyFactory().for_rule(HolidayRule.SECOND_FOURTH_SATURDAY)

    for day in (1, 8, 15, 22, 29):
        assert policy.is_holiday(date(2025, 6, day))
    assert not policy.is_holiday(date(2025, 6, 2))


def test_fourth_saturday_rule_from_string():
    policy = HolidayPolicyFactory().for_rule("4th_saturday")

    assert not policy.is_holiday(date(2025, 6, 14))
    assert policy.is_holiday(date(2025, 6, 28))
    assert policy.is_holiday(date(2025, 6, 29))


def test_unknown_rule_rejected():
    with pytest.raises(ValidationError):
        HolidayPolicyFactory().for_rule("every_saturday")


def test_extra_holidays_override_attendance():
    policy = HolidayPolicyFactory().for_rule(extra_holidays=[date(2025, 8, 15)])
    calc = StandardGridCalculator(policy)

    grid = calc.compute_monthly_grid(2025, 8, [{"date": "2025-08-15", "status": "Present"}], [])

    assert grid.days[14].status == DayStatus.HOLIDAY
    assert grid.total_payable == 0


def test_calculator_with_fourth_saturday_policy():
    calc = StandardGridCalculator(HolidayPolicyFactory().for_rule(HolidayRule.FOURTH_SATURDAY))

    grid = calc.compute_monthly_grid(2025, 6, [{"date": "2025-06-14", "status": "P"}], [])

    assert grid.days[13].status == DayStatus.PRESENT
    assert grid.days[27].status == DayStatus.HOLIDAY


def test_sunday_only_rule_keeps_saturdays_working():
    policy = HolidayPolicyFactory().for_rule(HolidayRule.SUNDAY_ONLY, extra_holidays=[date(2025, 6, 5)])

    assert policy.saturday_ordinals == frozenset()
    assert not any(policy.is_holiday(date(2025, 6, d)) for d in (7, 14, 21, 28))
    assert policy.is_holiday(date(2025, 6, 1))
    assert policy.is_holiday(date(2025, 6, 5))


def test_unknown_rule_error_does_not_chain_value_error():
    with pytest.raises(ValidationError) as excinfo:
        HolidayPolicyFactory().for_rule("bogus")

    assert excinfo.value.__cause__ is None
    assert excinfo.value.__suppress_context__
