"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

from .enums import DayStatus, LeaveStatus

# Attendance statuses counted as present. Matched exactly (no case folding).
PRESENT_STATUS_CODES = ("Present", "P")

APPROVED_LEAVE_STATUS = LeaveStatus.APPROVED.value

MIN_YEAR = 1
MAX_YEAR = 9999

DISPLAY_CODES = {
    DayStatus.PRESENT: "P",
    DayStatus.ABSENT: "A",
    DayStatus.LEAVE: "L",
    DayStatus.HOLIDAY: "H",
}
