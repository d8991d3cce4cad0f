"""Logging helpers for command line use.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed by the application, here the bundled CLI.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: int | str = logging.INFO) -> None:
    """Configure a console handler on the root logger.

    Args:
        log_level: Numeric level (e.g., ``logging.INFO``) or its name.
    """

    logger = logging.getLogger()
    if isinstance(log_level, str):
        log_level = log_level.upper()
    logger.setLevel(log_level)
    if logger.handlers:
        # Avoid adding duplicate handlers when called multiple times.
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
