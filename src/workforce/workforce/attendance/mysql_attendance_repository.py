from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import month_bounds
from ..database.connection import ConnectionFactory
from ..database.mysql_base import fetchall, read_cursor
from .model import DayRecord
from .parsing import parse_day_records
from .repository import AttendanceSource


class MySQLAttendanceSource(AttendanceSource):
    def __init__(self, conn_factory: ConnectionFactory):
        self._conn_factory = conn_factory

    def get_month_records(self, employee_id: str, year: int, month: int) -> Sequence[DayRecord]:
        first, last = month_bounds(year, month)
        with read_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT work_date, status, punch_in_time, punch_out_time
                FROM attendance_records
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (str(employee_id), first, last),
            )
            rows = fetchall(cur)
        return parse_day_records(rows)

    def list_employee_ids(self, year: int, month: int) -> Sequence[str]:
        first, last = month_bounds(year, month)
        with read_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT DISTINCT employee_id
                FROM attendance_records
                WHERE work_date BETWEEN %s AND %s
                ORDER BY employee_id
                """,
                (first, last),
            )
            rows = fetchall(cur)
        return [str(r["employee_id"]) for r in rows]
