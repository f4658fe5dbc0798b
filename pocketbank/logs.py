"""Logging setup for the command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr through rich.

    Args:
        verbose: Show INFO records as well as warnings and errors.
    """
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("pocketbank")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.INFO if verbose else logging.WARNING)
    root.propagate = False
