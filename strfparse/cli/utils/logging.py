"""Set up logging for the strfparse CLI."""

from logging import DEBUG, INFO, Formatter, Handler
from logging.handlers import RotatingFileHandler
from pathlib import Path

import platformdirs
from rich.console import Console
from rich.logging import RichHandler

from strfparse.core import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(module)s.%(funcName)s: %(message)s"


def get_log_path() -> Path:
    """Return the log file location, creating its directory if needed."""
    return (
        platformdirs.user_log_path("strfparse", ensure_exists=True) / "strfparse.log"
    ).resolve()


def setup(debug: bool, console: Console) -> None:
    """Set up logging configuration for CLI.

    The log file always records failed parses with their input, format and
    pattern. With ``debug`` it also keeps every pipeline step, and the same
    trail is echoed to the console. Without ``debug`` the console only shows
    the error line printed by the command.
    """
    log_path = get_log_path()
    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setFormatter(Formatter(fmt=LOG_FORMAT))
    file_handler.setLevel(DEBUG if debug else INFO)

    handlers: list[Handler] = [file_handler]
    if debug:
        handlers.append(
            RichHandler(
                level=DEBUG,
                console=console,
                show_path=False,
                show_time=False,
                markup=False,
                rich_tracebacks=True,
            )
        )

    logging.setup(*handlers)
    logging.logger.debug("Logging to file: %s", log_path.as_posix())
