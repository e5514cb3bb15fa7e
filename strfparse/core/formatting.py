"""Render datetimes using the parser's directive vocabulary."""

import re
from datetime import datetime

from strfparse.core.directives import SHORT_YEAR_CENTURY, Directive
from strfparse.core.pattern import PLACEHOLDER_PATTERN


def format_date(value: datetime, format_string: str) -> str:
    """Format a datetime with the directives understood by :func:`parse`.

    Unsupported tokens and literal text are copied unchanged. Only values
    that parse back to the same field are rendered: ``%y`` needs a year in
    2000-2099 and ``%Y`` a year of 100 or more, since :func:`parse` reads
    years below 100 as 19xx.

    Example:
        >>> format_date(datetime(2043, 12, 1, 9, 5), "%d/%m/%y %h:%M")
        '01/12/43 09:05'

    Raises:
        ValueError: If the year cannot be written with a requested directive.
    """

    def replace(match: re.Match[str]) -> str:
        token = match.group(0)
        match token:
            case Directive.FULL_YEAR:
                if value.year < 100:
                    raise ValueError(
                        f"Year {value.year} cannot be formatted with {token}."
                    )
                return f"{value.year:04d}"
            case Directive.SHORT_YEAR:
                if not 0 <= value.year - SHORT_YEAR_CENTURY <= 99:
                    raise ValueError(
                        f"Year {value.year} cannot be formatted with {token}."
                    )
                return f"{value.year - SHORT_YEAR_CENTURY:02d}"
            case Directive.MONTH:
                return f"{value.month:02d}"
            case Directive.DAY:
                return f"{value.day:02d}"
            case Directive.HOUR:
                return f"{value.hour:02d}"
            case Directive.MINUTE:
                return f"{value.minute:02d}"
            case Directive.SECOND:
                return f"{value.second:02d}"
            case Directive.MILLISECOND:
                return f"{value.microsecond // 1000:03d}"
            case _:
                return token

    return PLACEHOLDER_PATTERN.sub(replace, format_string)
