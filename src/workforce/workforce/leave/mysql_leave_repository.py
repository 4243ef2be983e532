from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import ConnectionFactory
from ..database.mysql_base import fetchall, read_cursor
from .model import LeaveInterval
from .parsing import parse_leave_intervals
from .repository import LeaveSource


class MySQLLeaveSource(LeaveSource):
    def __init__(self, conn_factory: ConnectionFactory):
        self._conn_factory = conn_factory

    def get_intervals_overlapping(self, employee_id: str, start: date, end: date) -> Sequence[LeaveInterval]:
        with read_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT start_date, end_date, status
                FROM leave_requests
                WHERE employee_id=%s AND start_date <= %s AND end_date >= %s
                ORDER BY start_date
                """,
                (str(employee_id), end, start),
            )
            rows = fetchall(cur)
        return parse_leave_intervals(rows)
