from __future__ import annotations

from ..core.constants import MAX_YEAR, MIN_YEAR
from ..core.exceptions import InvalidMonthError, InvalidYearError


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def require_month(month) -> int:
    if not _is_int(month) or not 1 <= month <= 12:
        raise InvalidMonthError(month)
    return month


def require_year(year) -> int:
    if not _is_int(year) or not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearError(year)
    return year
