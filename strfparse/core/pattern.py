"""Build and apply the pattern that pulls field values out of a date string."""

import re

from strfparse.core.logging import logger
from strfparse.exceptions import InputFormatError

PLACEHOLDER_PATTERN = re.compile(r"%\w", re.ASCII)
"""Matches a directive token: ``%`` followed by one word character."""

RESERVED_CHARS_PATTERN = re.compile(r"[-\[\]{}()*+?.,\\^$|#\s]")
"""Matches characters that have a special meaning inside a pattern."""

VALUE_GROUP = r"(\d+)"


def extract_placeholders(format_string: str) -> list[str]:
    """Return the directive tokens of a format string in order of appearance.

    Duplicates are kept and unsupported tokens such as ``%Q`` are returned too.

    Example:
        >>> extract_placeholders("%m-%d-%Y")
        ['%m', '%d', '%Y']
    """
    return PLACEHOLDER_PATTERN.findall(format_string)


def escape_reserved_chars(text: str) -> str:
    """Backslash-escape every reserved pattern character in the text."""
    return RESERVED_CHARS_PATTERN.sub(r"\\\g<0>", text)


def build_pattern(format_string: str, placeholders: list[str]) -> re.Pattern[str]:
    """Create a pattern capturing one run of digits per placeholder.

    The format string is escaped first, then the first remaining occurrence
    of each placeholder is swapped for a capture group. ``%Y-%m`` becomes
    ``(\\d+)\\-(\\d+)``.

    Args:
        format_string: The strftime-style format string.
        placeholders: Tokens returned by :func:`extract_placeholders`.

    Returns:
        re.Pattern: The compiled, unanchored extraction pattern.
    """
    source = escape_reserved_chars(format_string)
    for token in placeholders:
        source = source.replace(token, VALUE_GROUP, 1)

    logger.debug("Built pattern %r from format %r.", source, format_string)
    return re.compile(source, re.ASCII)


def extract_values(time_string: str, pattern: re.Pattern[str]) -> list[str]:
    """Apply the pattern once and return the captured digit strings in order.

    Raises:
        InputFormatError: If the pattern is not found in the input.
    """
    match = pattern.search(time_string)
    if match is None:
        raise InputFormatError()
    return list(match.groups())
