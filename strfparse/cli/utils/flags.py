"""Common flags for CLI commands."""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from strfparse.cli.app import AppState
from strfparse.cli.utils.output import OutputFormat

_AnyCallable = Callable[..., Any]
FC = TypeVar("FC", bound="_AnyCallable | click.Command")


def _callback(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
    """Callback to handle common flag."""
    if not ctx.resilient_parsing:
        state = ctx.ensure_object(AppState)
        if param.name == "debug" and value:
            state.debug = value
        elif param.name == "no_color" and value:
            state.no_color = value
    return value


def debug() -> Callable[[FC], FC]:
    """Common debug/verbose option for CLI commands."""
    return click.option(
        "--debug",
        "--verbose",
        "-d",
        is_flag=True,
        help="Enable verbose logging.",
        expose_value=False,
        callback=_callback,
        envvar=("STRFPARSE_DEBUG", "DEBUG"),
    )


def no_color() -> Callable[[FC], FC]:
    """Common no-color option for CLI commands."""
    return click.option(
        "--no-color",
        is_flag=True,
        help="Disable colored output.",
        expose_value=False,
        callback=_callback,
        envvar=("STRFPARSE_NO_COLOR", "NO_COLOR"),
    )


def output_format() -> Callable[[FC], FC]:
    """Common output format option for commands that print results."""
    return click.option(
        "--output",
        "-o",
        "fmt",
        type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
        default=OutputFormat.TABLE.value,
        help="Output format.",
        show_default=True,
    )


def common_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Apply common options to a Click command."""
    options = [
        click.version_option(None, "--version", "-v", prog_name="strfparse"),
    ]
    return functools.reduce(lambda x, opt: opt(x), options, f)
