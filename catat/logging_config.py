"""Logging configuration for catat.

Diagnostics go to stderr through rich so they never mix with listings on
stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Install a stderr handler on the ``catat`` logger.

    Args:
        verbose: Log at DEBUG (per-file scan results) instead of WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger("catat")
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)
