"""Logging setup for pricewatch.

Logs go to stderr through rich so they never mix with the status lines
printed on stdout.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "PRICEWATCH_LOG_LEVEL"


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger.

    ``--verbose`` forces DEBUG. Otherwise the level comes from
    PRICEWATCH_LOG_LEVEL, falling back to WARNING.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
        if not isinstance(level, int):
            level = logging.WARNING

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)
    # urllib3 is noisy at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))
