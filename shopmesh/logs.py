"""Service loggers that write prefixed, timestamped lines to a stream."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def init_logger(prefix: str, stream: TextIO | None = None) -> logging.Logger:
    """Create (or reset) the logger for a service and announce it.

    Every line looks like ``<prefix>YYYY/MM/DD HH:MM:SS <message>``.
    Calling this again for the same prefix replaces the previous handler.
    """
    name = "shopmesh." + (prefix.strip().rstrip(":").strip().lower() or "service")
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    fmt = prefix.replace("%", "%%") + "%(asctime)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    logger.info("Logger initialized")
    return logger