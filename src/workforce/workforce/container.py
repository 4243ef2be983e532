from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Mapping

from .attendance.mysql_attendance_repository import MySQLAttendanceSource
from .core.enums import HolidayRule
from .database.connection import ConnectionFactory, DBConfig
from .holidays.factory import HolidayPolicyFactory
from .leave.mysql_leave_repository import MySQLLeaveSource
from .payroll.calculator.base import GridCalculator
from .payroll.calculator.standard_calculator import StandardGridCalculator
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    conn: ConnectionFactory

    attendance_source: MySQLAttendanceSource
    leave_source: MySQLLeaveSource

    grid_calculator: GridCalculator
    payroll_report_service: PayrollReportService


def build_container(
    *,
    db_config: Mapping,
    holiday_rule: str = HolidayRule.SECOND_FOURTH_SATURDAY.value,
    extra_holidays: Iterable[date] = (),
) -> Container:
    conn = ConnectionFactory(DBConfig.from_mapping(db_config))

    attendance_source = MySQLAttendanceSource(conn)
    leave_source = MySQLLeaveSource(conn)

    policy = HolidayPolicyFactory().for_rule(holiday_rule, extra_holidays=extra_holidays)
    grid_calculator = StandardGridCalculator(policy)
    payroll_report_service = PayrollReportService(attendance_source, leave_source, calculator=grid_calculator)

    return Container(
        conn=conn,
        attendance_source=attendance_source,
        leave_source=leave_source,
        grid_calculator=grid_calculator,
        payroll_report_service=payroll_report_service,
    )
