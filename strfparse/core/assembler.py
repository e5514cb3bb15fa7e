"""Assemble extracted values into date fields and a datetime."""

from collections.abc import Sequence
from datetime import datetime, timedelta

from strfparse.core.directives import SHORT_YEAR_CENTURY, DateFields, Directive
from strfparse.core.logging import logger
from strfparse.exceptions import InputFormatError


def build_fields(placeholders: Sequence[str], values: Sequence[str]) -> DateFields:
    """Map each placeholder's captured value onto a field record.

    Values are read as base-10 integers so zero-padded input such as ``"08"``
    keeps its decimal meaning. Unsupported placeholders are ignored.

    Args:
        placeholders: Directive tokens in format order.
        values: Captured digit strings, in the same order.

    Returns:
        DateFields: The record, with defaults for fields not in the format.

    Raises:
        InputFormatError: If a value has too many digits to be read.
    """
    fields = DateFields()
    for token, raw in zip(placeholders, values, strict=True):
        try:
            value = int(raw, 10)
        except ValueError as e:
            raise InputFormatError(
                f"Value for {token} is too long to parse ({len(raw)} digits)."
            ) from e
        match token:
            case Directive.FULL_YEAR:
                fields.year = value
            case Directive.SHORT_YEAR:
                fields.year = value + SHORT_YEAR_CENTURY
            case Directive.MONTH:
                fields.month = value
            case Directive.DAY:
                fields.day = value
            case Directive.HOUR:
                fields.hour = value
            case Directive.MINUTE:
                fields.minute = value
            case Directive.SECOND:
                fields.second = value
            case Directive.MILLISECOND:
                fields.millisecond = value
            case _:
                logger.debug("Ignoring unsupported directive %s.", token)

    logger.debug("Assembled date fields: %s.", fields)
    return fields


def to_datetime(fields: DateFields) -> datetime:
    """Convert a field record into a datetime.

    Out of range values carry over into the next larger unit, so month 13 is
    January of the following year and hour 24 is midnight of the next day.
    Years 0 to 99 are read as 1900 to 1999.

    Raises:
        InputFormatError: If the result falls outside what datetime supports.
    """
    year = fields.year + 1900 if 0 <= fields.year <= 99 else fields.year
    # month offset is zero-based from here on
    extra_years, month_index = divmod(fields.month - 1, 12)
    try:
        start = datetime(year + extra_years, month_index + 1, 1)
        return start + timedelta(
            days=fields.day - 1,
            hours=fields.hour,
            minutes=fields.minute,
            seconds=fields.second,
            milliseconds=fields.millisecond,
        )
    except (ValueError, OverflowError) as e:
        raise InputFormatError(
            f"Parsed values {fields} do not form a representable date."
        ) from e
