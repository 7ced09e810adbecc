"""Logging setup for the coffee timer."""
from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

APP_NAME = "coffeetimer"

logger = logging.getLogger(APP_NAME)
logger.setLevel(logging.DEBUG)


def setup_logging(verbose: bool = False) -> None:
    """Attach a rich console handler on stderr, once per process.

    Args:
        verbose: Show debug records instead of warnings and above only.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            return

    rh = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        show_level=False,
        log_time_format="[%H:%M:%S]",
    )
    rh.setLevel(level)
    logger.addHandler(rh)
