from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_PACKAGE_LOGGER = "mortgage_lite"


def configure_logging(verbose: bool = False) -> None:
    """
    Route the package loggers to stderr through rich.

    Safe to call more than once: any handler installed by a previous call is
    replaced, so repeated CLI invocations in one process don't duplicate output.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
