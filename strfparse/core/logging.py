"""Logging setup for strfparse."""

import logging

logger = logging.getLogger("strfparse")


def setup(*handlers: logging.Handler) -> None:
    """Set up logging configuration.

    Handlers from an earlier call are closed and replaced.
    """
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.debug("Logging initialized with handlers: %s.", handlers)
