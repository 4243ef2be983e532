from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Classification of one calendar day in a monthly attendance grid."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LEAVE = "Leave"
    HOLIDAY = "Holiday"


class LeaveStatus(str, Enum):
    """Approval state of a leave request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class HolidayRule(str, Enum):
    """Which Saturdays of the month are off (Sundays are always off)."""

    SECOND_FOURTH_SATURDAY = "2nd_4th_saturday"
    FOURTH_SATURDAY = "4th_saturday"
    # Projects working every Saturday (e.g. the Exozen - Ops rota)
    SUNDAY_ONLY = "sunday_only"
