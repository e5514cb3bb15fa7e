"""Tests for formatting datetimes with parser directives."""

from datetime import datetime

import pytest

from strfparse import format_date, parse

VALUE = datetime(2043, 7, 9, 13, 45, 30, 125000)


def test_format_all_directives():
    """Test every directive renders zero padded."""
    value = datetime(2043, 12, 1, 9, 5, 7, 250000)
    assert format_date(value, "%Y-%m-%d %h:%M:%S.%L") == "2043-12-01 09:05:07.250"


def test_format_short_year():
    """Test %y renders the year within the century."""
    assert format_date(datetime(2005, 1, 1), "%d/%m/%y") == "01/01/05"


def test_unsupported_tokens_and_literals_kept():
    """Test unknown directives and plain text are copied as is."""
    assert format_date(VALUE, "on %Y (%Q) 100%") == "on 2043 (%Q) 100%"


@pytest.mark.parametrize(
    "token,attribute",
    [
        ("%Y", "year"),
        ("%y", "year"),
        ("%m", "month"),
        ("%d", "day"),
        ("%h", "hour"),
        ("%M", "minute"),
        ("%S", "second"),
        ("%L", "microsecond"),
    ],
)
def test_parse_recovers_formatted_field(token, attribute):
    """Test parsing a formatted directive gives back the same field value."""
    parsed = parse(format_date(VALUE, token), token)
    assert getattr(parsed, attribute) == getattr(VALUE, attribute)


@pytest.mark.parametrize(
    "token,year",
    [("%y", 2000), ("%y", 2099), ("%Y", 100), ("%Y", 1999), ("%Y", 9999)],
    ids=["short_first", "short_last", "full_100", "full_1999", "full_9999"],
)
def test_boundary_years_round_trip(token, year):
    """Test the edges of each year directive's range parse back."""
    value = datetime(year, 1, 1)
    assert parse(format_date(value, token), token).year == year


@pytest.mark.parametrize(
    "token,year",
    [("%y", 1999), ("%y", 2100), ("%Y", 99), ("%Y", 1)],
    ids=["short_before_2000", "short_after_2099", "full_99", "full_1"],
)
def test_years_that_cannot_round_trip_raise(token, year):
    """Test years a directive would misrepresent are rejected."""
    with pytest.raises(ValueError, match=f"Year {year}"):
        format_date(datetime(year, 1, 1), f"on {token}")
