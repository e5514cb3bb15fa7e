"""Click group and command classes used by the strfparse CLI."""

from collections.abc import Callable
from typing import Any

import click

from strfparse.cli.utils import output
from strfparse.core.logging import logger
from strfparse.exceptions import DateParseError, ErrorKind

_AnyCallable = Callable[..., Any]

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def group(**kwargs) -> Callable[[_AnyCallable], click.Group]:
    """Create the top level command group."""
    kwargs.setdefault("context_settings", CONTEXT_SETTINGS)
    kwargs.setdefault("options_metavar", "[options]")
    kwargs.setdefault("subcommand_metavar", "<command>")
    return click.group(**kwargs)


def report_parse_failure(error: DateParseError) -> None:
    """Log a failed parse with its debug payload and tell the user why.

    When the input did not match, the derived pattern is shown as a hint
    since the format string alone rarely explains the mismatch.
    """
    debug = error.debug
    pattern = debug.pattern.pattern if debug and debug.pattern else None
    logger.info(
        "%s (%s): input=%r format=%r pattern=%s",
        type(error).__name__,
        error.kind,
        debug.input if debug else None,
        debug.format if debug else None,
        pattern,
        exc_info=True,
    )
    output.display_error(error.message)
    if error.kind == ErrorKind.PARSE_VALUE and pattern is not None:
        output.display_hint(f"Looked for pattern {pattern}")


class StrfParseCommand(click.Command):
    """Command that turns strfparse errors into a message and exit status 1."""

    def invoke(self, ctx):
        """Invoke the command, reporting parse and validation failures."""
        try:
            return super().invoke(ctx)
        except DateParseError as e:
            report_parse_failure(e)
            ctx.exit(1)


def command(name: str, **kwargs) -> Callable[[_AnyCallable], StrfParseCommand]:
    """Create a subcommand with the shared help options."""
    kwargs.setdefault("context_settings", CONTEXT_SETTINGS)
    kwargs.setdefault("options_metavar", "[options]")
    return click.command(name, cls=StrfParseCommand, **kwargs)
