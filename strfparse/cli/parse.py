"""CLI command for parsing date/time strings."""

import click

from strfparse.cli.utils import flags, output, overrides
from strfparse.core import parser
from strfparse.core.logging import logger
from strfparse.core.validators import ValidationConfig
from strfparse.models.result import ParseResult


@overrides.command("parse")
@click.argument("time_string", metavar="<time-string>")
@click.argument("format_string", metavar="<format-string>")
@click.option(
    "--validate",
    is_flag=True,
    help="Check that month and day are in range.",
)
@click.option(
    "--past",
    is_flag=True,
    help="Require the date to be in the past. Implies --validate.",
)
@click.option(
    "--future",
    is_flag=True,
    help="Require the date to be in the future. Implies --validate.",
)
@flags.output_format()
def parse(
    time_string: str,
    format_string: str,
    validate: bool,
    past: bool,
    future: bool,
    fmt: str,
) -> None:
    """Parse a date/time string with a strftime-style format.

    Supported directives: %Y %y %m %d %h %M %S %L.

    \b
    Examples:
    * strfparse parse 2043-12-01 %Y-%m-%d
    * strfparse parse 12-01-2043 %m-%d-%Y --past
    """  # noqa: D301
    validation = None
    if validate or past or future:
        validation = ValidationConfig(date_is_in_past=past, date_is_in_future=future)

    logger.debug(
        "Parsing %r with format %r and validation %s.",
        time_string,
        format_string,
        validation,
    )
    value, extraction_pattern = parser.parse_with_pattern(
        time_string, format_string, validation
    )

    result = ParseResult(
        input=time_string,
        format=format_string,
        pattern=extraction_pattern.pattern,
        parsed=value,
    )
    output.display_list(ParseResult, [result], output.OutputFormat(fmt.lower()))
