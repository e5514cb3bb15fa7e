"""Main CLI entry point for strfparse."""

import sys

import click

from strfparse.cli.app import AppState
from strfparse.cli.directives import directives
from strfparse.cli.parse import parse
from strfparse.cli.utils import flags, output
from strfparse.cli.utils.overrides import group


@group()
@flags.common_options
@flags.debug()
@flags.no_color()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Parse dates using strftime-style format strings."""
    state = ctx.ensure_object(AppState)

    output.initialize_app_state(state)


cli.add_command(parse)
cli.add_command(directives)

if __name__ == "__main__":
    sys.exit(cli())
