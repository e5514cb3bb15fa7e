"""Sanity checks for parsed dates."""

from dataclasses import dataclass
from datetime import datetime

from strfparse.core.directives import DateFields
from strfparse.core.logging import logger
from strfparse.exceptions import (
    DateInFutureError,
    DateInPastError,
    InvalidDayError,
    InvalidMonthError,
)


@dataclass(slots=True, frozen=True)
class ValidationConfig:
    """Which sanity checks to run on a parsed date.

    Month and day range checks always run once a config is given.

    Attributes:
        date_is_in_past (bool): Require the date to be earlier than now.
        date_is_in_future (bool): Require the date to be later than now.
    """

    date_is_in_past: bool = False
    date_is_in_future: bool = False


def _current_time() -> datetime:
    return datetime.now()


def check_ranges(fields: DateFields) -> None:
    """Check the month and day of a field record.

    Runs on the record itself, before any datetime is built, so a month too
    large for ``datetime`` is still reported as a month error.

    Raises:
        InvalidMonthError: If the month is not between 1 and 12.
        InvalidDayError: If the day is not between 1 and 31.
    """
    if not 1 <= fields.month <= 12:
        raise InvalidMonthError(fields.month)

    # No per-month day count; Feb 31 passes.
    if not 1 <= fields.day <= 31:
        raise InvalidDayError(fields.day)


def check_direction(value: datetime, config: ValidationConfig) -> None:
    """Check the past and future constraints requested by ``config``.

    "Now" is read once per call. A date equal to now is neither in the past
    nor in the future.

    Raises:
        DateInFutureError: If the date must be in the past but is not.
        DateInPastError: If the date must be in the future but is not.
    """
    now = _current_time()

    if config.date_is_in_past and not value < now:
        raise DateInFutureError(value)

    if config.date_is_in_future and not value > now:
        raise DateInPastError(value)

    logger.debug("Date %s passed sanity checks %s.", value, config)
