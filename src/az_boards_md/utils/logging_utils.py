"""Logging setup for the command line."""

import logging

from rich.logging import RichHandler

from az_boards_md.utils.console import get_error_console

LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through rich.

    Args:
        verbose: Log at DEBUG instead of WARNING
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=get_error_console(),
                show_time=False,
                show_path=False,
                markup=False,
            )
        ],
        force=True,
    )
    # Request/connection chatter from httpx stays out of --verbose output
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
