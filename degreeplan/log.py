"""Centralized logging configuration.

Call setup_logging() once at application startup. Library modules only
create module-level loggers and never configure handlers themselves.
"""

import logging
import sys
from typing import Optional

from .config import LOG_LEVEL


def setup_logging(level: Optional[str] = None) -> None:
    """Configure a single stream handler on the ``degreeplan`` logger."""
    level_name = (level or LOG_LEVEL).upper()
    package_logger = logging.getLogger("degreeplan")
    package_logger.setLevel(getattr(logging, level_name, logging.INFO))

    # Avoid duplicate handlers on repeated calls
    if package_logger.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    package_logger.addHandler(handler)
