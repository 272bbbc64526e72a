class TimePeriodError(Exception):
    """Base class for custom errors in the time-period package."""


class ColumnTypeError(TimePeriodError, TypeError):
    """Raised when a series is not the expected type."""


class PeriodError(TimePeriodError):
    """Base exception for all period-related errors."""


class PeriodOverflowError(PeriodError, OverflowError):
    """Raised when an elapsed duration holds more whole seconds than a period field can represent."""

    def __init__(self, msg: str | None = None, seconds: int | None = None):
        if not msg:
            msg = f"Period overflow: {seconds} seconds is outside the signed 64-bit range."
        self.seconds = seconds
        super().__init__(msg)


class PeriodParsingError(PeriodError, ValueError):
    """Raised when a period string cannot be parsed."""

    def __init__(self, msg: str | None = None, string: str | None = None):
        if not msg:
            msg = f"Bad period format: {string!r}"
        self.string = string
        super().__init__(msg)
