"""Utility functions for CLI output."""

import csv
from collections.abc import Sequence
from datetime import datetime
from enum import StrEnum, auto
from io import StringIO
from typing import TypeVar

from pydantic import BaseModel, RootModel
from pydantic.fields import FieldInfo
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from strfparse.cli.app import AppState
from strfparse.cli.utils import logging

_console = Console()  # Global console instance for utility functions
_error_console = Console(stderr=True)  # Console for error messages


class OutputFormat(StrEnum):
    """Enumeration of supported output formats."""

    TABLE = auto()
    CSV = auto()
    JSON = auto()


def _ordered_fields(schema: dict[str, FieldInfo]) -> list[str]:
    return sorted(
        schema.keys(),
        key=lambda x: (schema[x].json_schema_extra or {}).get("order", 0),  # type: ignore
    )


def _format_value(data: object) -> str:
    if isinstance(data, datetime):
        return data.isoformat(sep=" ", timespec="milliseconds")
    return str(data)


def _convert_models_to_rich_table(
    items: Sequence[BaseModel], schema: dict[str, FieldInfo]
) -> Table:
    """Convert a list of Pydantic models to a Rich Table for pretty printing."""
    table = Table(header_style="dim", box=box.SIMPLE)
    ordered_fields = _ordered_fields(schema)
    for field_name in ordered_fields:
        field_info = schema[field_name]
        extras: dict = field_info.json_schema_extra or {}  # type: ignore
        table.add_column(
            field_info.title or field_name.capitalize(),
            justify=extras.get("justify", "left"),
            style=extras.get("style"),
        )

    for item in items:
        # Text() keeps pattern backslashes and brackets out of rich markup.
        table.add_row(
            *(Text(_format_value(getattr(item, name))) for name in ordered_fields)
        )

    return table


def display_message(*objects: object, console: Console | None = None) -> None:
    """Display a general message to the console."""
    (console or _console).print(*objects)


def display_error(
    message: str, tag: str = "Error:", console: Console | None = None
) -> None:
    """Display an error message to the error console."""
    (console or _error_console).print(f"[bold red]{tag}[/bold red]", Text(message))


def display_hint(message: str, console: Console | None = None) -> None:
    """Display a dim follow-up line under an error."""
    (console or _error_console).print(Text(message, style="dim"))


T = TypeVar("T", bound=BaseModel)


def display_list(cls: type[T], items: Sequence[T], fmt: OutputFormat) -> None:
    """Display a list of items to the console in the specified format.

    Args:
        cls: The class type of the models in the list.
        items (Sequence): The list of items to display.
        fmt (OutputFormat): The desired output format (TABLE, CSV, JSON).
    """
    root_model = RootModel[Sequence[T]](items)
    if fmt == OutputFormat.JSON:
        _console.print_json(root_model.model_dump_json(indent=4))
    elif fmt == OutputFormat.CSV:
        f = StringIO()
        writer = csv.DictWriter(f, fieldnames=_ordered_fields(cls.model_fields))
        writer.writeheader()
        writer.writerows(root_model.model_dump())
        _console.print(f.getvalue(), soft_wrap=True, markup=False, highlight=False)
    else:
        _console.print(_convert_models_to_rich_table(items, cls.model_fields))


def initialize_app_state(state: AppState) -> None:
    """Initialize the application state for CLI operations.

    Applies color settings and initializes logging.

    Args:
        state (AppState): The application state object to initialize.
    """
    if state.no_color:
        _console.no_color = True
        _error_console.no_color = True

    logging.setup(state.debug, _error_console)

