class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidMonthError(ValidationError):
    """Raised when a month number is outside 1..12."""

    def __init__(self, month):
        super().__init__(f"Invalid month: {month!r} (expected 1-12)")
        self.month = month


class InvalidYearError(ValidationError):
    """Raised when a year cannot be handled by the calendar."""

    def __init__(self, year):
        super().__init__(f"Invalid year: {year!r}")
        self.year = year
