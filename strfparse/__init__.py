"""Parse date/time strings using strftime-style format strings."""

from strfparse.core.formatting import format_date
from strfparse.core.parser import parse
from strfparse.core.validators import ValidationConfig
from strfparse.exceptions import DateParseError, ErrorKind, StrfParseError

__all__ = [
    "DateParseError",
    "ErrorKind",
    "StrfParseError",
    "ValidationConfig",
    "format_date",
    "parse",
]
