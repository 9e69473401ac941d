"""Logging configuration for the aoc2023 pipeline.

Console output goes through Rich on stderr so that results printed to
stdout stay clean for piping.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from aoc2023.config import settings


def setup_logging(log_level: Optional[str] = None, verbose: bool = False) -> None:
    """Configure the root logger.

    Args:
        log_level: Logging level name (defaults to settings)
        verbose: Force DEBUG level regardless of ``log_level``
    """
    level = "DEBUG" if verbose else (log_level or settings.log_level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).debug("Logging configured at %s", level)
