import logging
from datetime import date, datetime

from src.workforce.workforce.leave.model import LeaveInterval
from src.workforce.workforce.leave.parsing import parse_leave_interval, parse_leave_intervals


def test_camel_case_api_row():
    interval = parse_leave_interval({"startDate": "2025-06-09", "endDate": "2025-06-11T00:00:00.000Z", "status": "Approved"})

    assert interval == LeaveInterval(start_date=date(2025, 6, 9), end_date=date(2025, 6, 11), status="Approved")
    assert interval.is_approved
    assert interval.covers(date(2025, 6, 11))
    assert not interval.covers(date(2025, 6, 12))


def test_snake_case_db_row():
    interval = parse_leave_interval({"start_date": date(2025, 6, 1), "end_date": date(2025, 6, 1), "status": "Pending"})

    assert interval.covers(date(2025, 6, 1))
    assert not interval.is_approved


def test_reversed_interval_kept_but_covers_nothing(caplog):
    with caplog.at_level(logging.WARNING):
        interval = parse_leave_interval({"startDate": "2025-06-20", "endDate": "2025-06-10", "status": "Approved"})

    assert interval.is_malformed
    assert not any(interval.covers(date(2025, 6, d)) for d in range(1, 31))
    assert "ends before it starts" in caplog.text


def test_unusable_rows_skipped():
    intervals = parse_leave_intervals(
        [
            {"startDate": "2025-06-09", "status": "Approved"},
            {"startDate": "soon", "endDate": "later", "status": "Approved"},
            ["2025-06-09", "2025-06-10"],
            {"startDate": "2025-06-09", "endDate": "2025-06-10", "status": "Approved"},
        ]
    )

    assert len(intervals) == 1


def test_interval_object_bounds_reduced_to_calendar_dates():
    interval = parse_leave_interval(
        LeaveInterval(start_date=datetime(2025, 6, 9, 8, 0), end_date=datetime(2025, 6, 11, 18, 0), status="Approved")
    )

    assert interval == LeaveInterval(start_date=date(2025, 6, 9), end_date=date(2025, 6, 11), status="Approved")
    assert interval.covers(date(2025, 6, 11))


def test_interval_object_with_bad_bounds_skipped(caplog):
    with caplog.at_level(logging.WARNING):
        intervals = parse_leave_intervals(
            [
                LeaveInterval(start_date="whenever", end_date=date(2025, 6, 10), status="Approved"),
                LeaveInterval(start_date=None, end_date=date(2025, 6, 10), status="Approved"),
            ]
        )

    assert intervals == []
    assert "Skipping leave interval" in caplog.text
