"""Parse date/time strings with strftime-style format strings."""

import re
from datetime import datetime

from strfparse.core import assembler, pattern as patterns
from strfparse.core.logging import logger
from strfparse.core.validators import ValidationConfig, check_direction, check_ranges
from strfparse.exceptions import DateParseError, DebugInfo


def parse(
    time_string: str,
    format_string: str,
    validation: ValidationConfig | None = None,
) -> datetime:
    """Parse a date/time string according to a format string.

    Supported directives are ``%Y %y %m %d %h %M %S %L``. Other ``%x`` tokens
    consume a run of digits but set nothing. Fields missing from the format
    keep their defaults.

    Example:
        >>> parse("2043-12-01", "%Y-%m-%d")
        datetime.datetime(2043, 12, 1, 0, 0)
        >>> parse("12-01-2043", "%m-%d-%Y", ValidationConfig(date_is_in_past=True))
        Traceback (most recent call last):
        ...
        strfparse.exceptions.DateInFutureError: Tue Dec 01 2043 is in the future. ...

    Args:
        time_string: The string to parse.
        format_string: The format describing ``time_string``.
        validation: Sanity checks to run. ``None`` skips validation entirely.

    Returns:
        datetime: The parsed date.

    Raises:
        DateParseError: If the input does not match the format or fails
            validation. The error's ``debug`` holds the input, format and
            derived pattern.
    """
    value, _ = parse_with_pattern(time_string, format_string, validation)
    return value


def parse_with_pattern(
    time_string: str,
    format_string: str,
    validation: ValidationConfig | None = None,
) -> tuple[datetime, re.Pattern[str]]:
    """Parse like :func:`parse`, also returning the extraction pattern used."""
    extraction_pattern: re.Pattern[str] | None = None
    try:
        placeholders = patterns.extract_placeholders(format_string)
        logger.debug("Placeholders in %r: %s.", format_string, placeholders)

        extraction_pattern = patterns.build_pattern(format_string, placeholders)
        values = patterns.extract_values(time_string, extraction_pattern)

        fields = assembler.build_fields(placeholders, values)
        if validation is not None:
            check_ranges(fields)

        value = assembler.to_datetime(fields)
        if validation is not None:
            check_direction(value, validation)

        return value, extraction_pattern
    except DateParseError as e:
        e.debug = DebugInfo(
            input=time_string, format=format_string, pattern=extraction_pattern
        )
        logger.debug("Failed to parse %r as %r: %s", time_string, format_string, e)
        raise
