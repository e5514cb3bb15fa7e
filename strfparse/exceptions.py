"""Custom exceptions for strfparse."""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class StrfParseError(Exception):
    """Base exception class for all strfparse errors."""

    def __init__(self, message: str | None = None, *args):
        """Initialize the StrfParseError.

        Args:
            message: Optional error message.
            *args: Additional arguments to pass to the base
            Exception class.
        """
        self.message = message or self.__class__.__name__
        super().__init__(self.message, *args)


class ErrorKind(StrEnum):
    """Machine-checkable tag identifying why a parse failed."""

    PARSE_VALUE = "PARSE_VALUE"
    INVALID_MONTH = "INPUT_SANITY_MONTH"
    INVALID_DAY = "INPUT_SANITY_DAY"
    DATE_IN_FUTURE = "INPUT_SANITY_FUTURE"
    DATE_IN_PAST = "INPUT_SANITY_PAST"


@dataclass(slots=True, frozen=True)
class DebugInfo:
    """Context attached to a failed parse."""

    input: str
    """The date/time string that was being parsed."""

    format: str
    """The format string it was parsed with."""

    pattern: re.Pattern[str] | None
    """The pattern derived from the format, if it was built."""


class DateParseError(StrfParseError):
    """Exception raised when a date/time string cannot be parsed or validated.

    Every subclass fixes a :class:`ErrorKind`. The ``debug`` payload is
    attached by :func:`strfparse.parse` before the error reaches the caller.
    """

    kind: ErrorKind

    def __init__(
        self, message: str | None = None, *args: object, debug: DebugInfo | None = None
    ) -> None:
        """Initialize the DateParseError.

        Args:
            message: Optional custom error message.
            *args: Additional arguments to pass to the base Exception class.
            debug: Optional debugging context for the failure.
        """
        super().__init__(message, *args)
        self.debug = debug


# Parse errors


class InputFormatError(DateParseError):
    """Exception raised when the input does not conform to the format."""

    kind = ErrorKind.PARSE_VALUE

    def __init__(self, message: str | None = None, *args: object, **kwargs) -> None:
        """Initialize the InputFormatError.

        Args:
            message: Optional custom error message.
            *args: Additional arguments to pass to the base Exception class.
            **kwargs: Keyword arguments for DateParseError.
        """
        if message is None:
            message = (
                "Error parsing values out of input. "
                "Make sure that the date conforms to the format specified."
            )
        super().__init__(message, *args, **kwargs)


# Sanity check errors


class InvalidMonthError(DateParseError):
    """Exception raised when the parsed month is outside 1-12."""

    kind = ErrorKind.INVALID_MONTH

    def __init__(self, value: int, message: str | None = None, *args: object) -> None:
        """Initialize the InvalidMonthError.

        Args:
            value: The offending month value.
            message: Optional custom error message.
            *args: Additional arguments to pass to the base Exception class.
        """
        if message is None:
            message = f"{value} is not a valid entry for Month. Must be between 1 and 12."
        super().__init__(message, *args)
        self.value = value


class InvalidDayError(DateParseError):
    """Exception raised when the parsed day is outside 1-31."""

    kind = ErrorKind.INVALID_DAY

    def __init__(self, value: int, message: str | None = None, *args: object) -> None:
        """Initialize the InvalidDayError.

        Args:
            value: The offending day value.
            message: Optional custom error message.
            *args: Additional arguments to pass to the base Exception class.
        """
        if message is None:
            message = f"{value} is not a valid entry for Day. Must be between 1 and 31."
        super().__init__(message, *args)
        self.value = value


class DateInFutureError(DateParseError):
    """Exception raised when a date required to be in the past is not."""

    kind = ErrorKind.DATE_IN_FUTURE

    def __init__(
        self, value: datetime, message: str | None = None, *args: object
    ) -> None:
        """Initialize the DateInFutureError.

        Args:
            value: The parsed date.
            message: Optional custom error message.
            *args: Additional arguments to pass to the base Exception class.
        """
        if message is None:
            message = (
                f"{value:%a %b %d %Y} is in the future. Date must be in the past."
            )
        super().__init__(message, *args)
        self.value = value


class DateInPastError(DateParseError):
    """Exception raised when a date required to be in the future is not."""

    kind = ErrorKind.DATE_IN_PAST

    def __init__(
        self, value: datetime, message: str | None = None, *args: object
    ) -> None:
        """Initialize the DateInPastError.

        Args:
            value: The parsed date.
            message: Optional custom error message.
            *args: Additional arguments to pass to the base Exception class.
        """
        if message is None:
            message = (
                f"{value:%a %b %d %Y} is in the past. Date must be in the future."
            )
        super().__init__(message, *args)
        self.value = value
