"""Supported format directives and the field record they populate."""

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple


class Directive(StrEnum):
    """Format directives understood by the parser."""

    FULL_YEAR = "%Y"
    SHORT_YEAR = "%y"
    MONTH = "%m"
    DAY = "%d"
    HOUR = "%h"
    MINUTE = "%M"
    SECOND = "%S"
    MILLISECOND = "%L"


SHORT_YEAR_CENTURY = 2000
"""Century added to two-digit years. There is no rollover."""


@dataclass(slots=True)
class DateFields:
    """Date and time fields extracted from an input string.

    Fields that no directive sets keep their defaults. ``month`` is always
    1-indexed here.
    """

    year: int = 0
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0


class DirectiveDescription(NamedTuple):
    """Human-readable description of a directive."""

    meaning: str
    range: str


DIRECTIVE_INFO: dict[Directive, DirectiveDescription] = {
    Directive.FULL_YEAR: DirectiveDescription("4-digit year", "none enforced"),
    Directive.SHORT_YEAR: DirectiveDescription(
        "2-digit year", f"stored as value+{SHORT_YEAR_CENTURY}"
    ),
    Directive.MONTH: DirectiveDescription(
        "month", "1-12 (validated only if validation requested)"
    ),
    Directive.DAY: DirectiveDescription(
        "day", "1-31 (validated only if validation requested)"
    ),
    Directive.HOUR: DirectiveDescription("hour", "unvalidated"),
    Directive.MINUTE: DirectiveDescription("minute", "unvalidated"),
    Directive.SECOND: DirectiveDescription("second", "unvalidated"),
    Directive.MILLISECOND: DirectiveDescription("millisecond", "unvalidated"),
}
