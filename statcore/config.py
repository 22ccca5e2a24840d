"""Package-wide defaults and logging setup.

Public functions always accept these values as explicit parameters; the
constants are only the fallbacks used when a caller omits them.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

DEFAULT_CONFIDENCE: float = 0.95
DEFAULT_ALPHA: float = 0.05
DEFAULT_BOOTSTRAP_SIZE: int = 1000

# Condition number of X^T X above which a fit is logged as ill-conditioned.
CONDITION_WARNING_THRESHOLD: float = 1e12

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(
    level: int = logging.INFO, log_file: Optional[str] = None
) -> logging.Logger:
    """Attach stream (and optionally file) handlers to the ``statcore`` logger.

    Args:
        level (int): Logging level applied to the package logger and handlers.
        log_file (str, optional): Path of a log file written in ``"w"`` mode.

    Returns:
        logging.Logger: The configured ``statcore`` logger.

    Note:
        Calling this function again replaces previously installed handlers,
        so repeated configuration never duplicates log lines.
    """
    logger = logging.getLogger("statcore")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="w"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
